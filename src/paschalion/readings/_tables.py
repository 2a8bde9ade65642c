# -*- coding: utf-8 -*-
"""
Raw lectionary data.

``GOSPEL_WEEKS`` and ``APOSTLE_WEEKS`` hold 37 weeks of seven days each,
Sunday first, indexed by the week number counted from Pentecost. A day
without a reading is ``None``; otherwise the entry is a pair of the
pericope number and its citation.

``GOSPEL_MOVABLE`` and ``APOSTLE_MOVABLE`` cover Great Lent through the
Saturday before Pentecost and are keyed by movable-feast markers (see
:mod:`paschalion.markers`).
"""

GOSPEL_WEEKS = (
    # week 0
    (
        (27, "Ин., 27 зач., VII, 37–52; VIII, 12."),
        None,
        None,
        None,
        None,
        None,
        None,
    ),
    # week 1
    (
        (38, "Мф., 38 зач., X, 32–33, 37–38; XIX, 27–30."),
        (75, "Мф., 75 зач., XVIII, 10–20."),
        (10, "Мф., 10 зач., IV, 25 – V, 12."),
        (12, "Мф., 12 зач., V, 20–26."),
        (13, "Мф., 13 зач., V, 27–32."),
        (14, "Мф., 14 зач., V, 33–41."),
        (15, "Мф., 15 зач., V, 42–48."),
    ),
    # week 2
    (
        (9, "Мф., 9 зач., IV, 18–23."),
        (19, "Мф., 19 зач., VI, 31–34; VII, 9–11."),
        (22, "Мф., 22 зач., VII, 15–21."),
        (23, "Мф., 23 зач., VII, 21–23."),
        (27, "Мф., 27 зач., VIII, 23–27."),
        (31, "Мф., 31 зач., IX, 14–17."),
        (20, "Мф., 20 зач., VII, 1–8."),
    ),
    # week 3
    (
        (18, "Мф., 18 зач., VI, 22–33."),
        (34, "Мф., 34 зач., IX, 36 – X, 8."),
        (35, "Мф., 35 зач., X, 9–15."),
        (36, "Мф., 36 зач., X, 16–22."),
        (37, "Мф., 37 зач., X, 23–31."),
        (38, "Мф., 38 зач., X, 32–36; XI, 1."),
        (24, "Мф., 24 зач., VII, 24 – VIII, 4."),
    ),
    # week 4
    (
        (25, "Мф., 25 зач., VIII, 5–13."),
        (40, "Мф., 40 зач., XI, 2–15."),
        (41, "Мф., 41 зач., XI, 16–20."),
        (42, "Мф., 42 зач., XI, 20–26."),
        (43, "Мф., 43 зач., XI, 27–30."),
        (44, "Мф., 44 зач., XII, 1–8."),
        (26, "Мф., 26 зач., VIII, 14–23."),
    ),
    # week 5
    (
        (28, "Мф., 28 зач., VIII, 28 - IX, 1."),
        (45, "Мф., 45 зач., XII, 9-13."),
        (46, "Мф., 46 зач., XII, 14–16, 22–30."),
        (48, "Мф., 48 зач., XII, 38–45."),
        (49, "Мф., 49 зач., XII, 46 – XIII, 3."),
        (50, "Мф., 50 зач., XIII, 3–9."),
        (30, "Мф., 30 зач., IX, 9–13."),
    ),
    # week 6
    (
        (29, "Мф., 29 зач., IX, 1–8."),
        (51, "Мф., 51 зач., XIII, 10–23."),
        (52, "Мф., 52 зач., XIII, 24–30."),
        (53, "Мф., 53 зач., XIII, 31–36."),
        (54, "Мф., 54 зач., XIII, 36–43."),
        (55, "Мф., 55 зач., XIII, 44–54."),
        (32, "Мф., 32 зач., IX, 18–26."),
    ),
    # week 7
    (
        (33, "Мф., 33 зач., IX, 27–35."),
        (56, "Мф., 56 зач., XIII, 54–58."),
        (57, "Мф., 57 зач., XIV, 1–13."),
        (60, "Мф., 60 зач., XIV, 35 – XV, 11."),
        (61, "Мф., 61 зач., XV, 12–21."),
        (63, "Мф., 63 зач., XV, 29–31."),
        (39, "Мф., 39 зач., X, 37 – XI, 1."),
    ),
    # week 8
    (
        (58, "Мф., 58 зач., XIV, 14–22."),
        (65, "Мф., 65 зач., XVI, 1-6."),
        (66, "Мф., 66 зач., XVI, 6-12."),
        (68, "Мф., 68 зач., XVI, 20–24."),
        (69, "Мф., 69 зач., XVI, 24–28."),
        (71, "Мф., 71 зач., XVII, 10-18."),
        (47, "Мф., 47 зач., XII, 30–37."),
    ),
    # week 9
    (
        (59, "Мф., 59 зач., XIV, 22–34."),
        (74, "Мф., 74 зач., XVIII, 1–11."),
        (76, "Мф., 76 зач., XVIII, 18–22; XIX, 1–2, 13–15."),
        (80, "Мф., 80 зач., XX, 1–16."),
        (81, "Мф., 81 зач., XX, 17–28."),
        (83, "Мф., 83 зач., XXI, 1–11, 15–17."),
        (64, "Мф., 64 зач., XV, 32–39."),
    ),
    # week 10
    (
        (72, "Мф., 72 зач., XVII, 14–23."),
        (84, "Мф., 84 зач., XXI, 18–22."),
        (85, "Мф., 85 зач., XXI, 23–27."),
        (86, "Мф., 86 зач., XXI, 28–32."),
        (88, "Мф., 88 зач., XXI, 43-46."),
        (91, "Мф., 91 зач., XXII, 23–33."),
        (73, "Мф., 73 зач., XVII, 24 – XVIII, 4."),
    ),
    # week 11
    (
        (77, "Мф., 77 зач., XVIII, 23–35."),
        (94, "Мф., 94 зач., XXIII, 13–22."),
        (95, "Мф., 95 зач., XXIII, 23-28."),
        (96, "Мф., 96 зач., XXIII, 29–39."),
        (99, "Мф., 99 зач., XXIV, 13–28."),
        (100, "Мф., 100 зач., XXIV, 27–33, 42–51."),
        (78, "Мф., 78 зач., XIX, 3–12."),
    ),
    # week 12
    (
        (79, "Мф., 79 зач., XIX, 16–26."),
        (2, "Мк., 2 зач., I, 9–15."),
        (3, "Мк., 3 зач., I, 16–22."),
        (4, "Мк., 4 зач., I, 23–28."),
        (5, "Мк., 5 зач., I, 29-35."),
        (9, "Мк., 9 зач., II, 18–22."),
        (82, "Мф., 82 зач., XX, 29–34."),
    ),
    # week 13
    (
        (87, "Мф., 87 зач., XXI, 33–42."),
        (11, "Мк., 11 зач., III, 6–12."),
        (12, "Мк., 12 зач., III, 13–19."),
        (13, "Мк., 13 зач., III, 20–27."),
        (14, "Мк., 14 зач., III, 28–35."),
        (15, "Мк., 15 зач., IV, 1–9."),
        (90, "Мф., 90 зач., XXII, 15-22."),
    ),
    # week 14
    (
        (89, "Мф., 89 зач., XXII, 1–14."),
        (16, "Мк., 16 зач., IV, 10–23."),
        (17, "Мк., 17 зач., IV, 24–34."),
        (18, "Мк., 18 зач., IV, 35–41."),
        (19, "Мк., 19 зач., V, 1-20."),
        (20, "Мк., 20 зач., V, 22–24, 35 – VI, 1."),
        (93, "Мф., 93 зач., XXIII, 1–12."),
    ),
    # week 15
    (
        (92, "Мф., 92 зач., XXII, 35–46."),
        (21, "Мк., 21 зач., V, 24–34."),
        (22, "Мк., 22 зач., VI, 1-7."),
        (23, "Мк., 23 зач., VI, 7–13."),
        (25, "Мк., 25 зач., VI, 30–45."),
        (26, "Мк., 26 зач., VI, 45–53."),
        (97, "Мф., 97 зач., XXIV, 1–13."),
    ),
    # week 16
    (
        (105, "Мф., 105 зач., XXV, 14-30."),
        (27, "Мк., 27 зач., VI, 54 - VII, 8."),
        (28, "Мк., 28 зач., VII, 5-16."),
        (29, "Мк., 29 зач., VII, 14–24."),
        (30, "Мк., 30 зач., VII, 24–30."),
        (32, "Мк., 32 зач., VIII, 1-10."),
        (101, "Мф., 101 зач., XXIV, 34–44."),
    ),
    # week 17
    (
        (62, "Мф., 62 зач., XV, 21–28."),
        (48, "Мк., 48 зач., X, 46–52."),
        (50, "Мк., 50 зач., XI, 11–23."),
        (51, "Мк., 51 зач., XI, 23–26."),
        (52, "Мк., 52 зач., XI, 27–33."),
        (53, "Мк., 53 зач., XII, 1–12."),
        (104, "Мф., 104 зач., XXV, 1–13."),
    ),
    # week 18
    (
        (17, "Лк., 17 зач., V, 1–11."),
        (10, "Лк., 10 зач., III, 19–22."),
        (11, "Лк., 11 зач., III, 23 – IV, 1."),
        (12, "Лк., 12 зач., IV, 1-15."),
        (13, "Лк., 13 зач., IV, 16–22."),
        (14, "Лк., 14 зач., IV, 22–30."),
        (15, "Лк., 15 зач., IV, 31–36."),
    ),
    # week 19
    (
        (26, "Лк., 26 зач., VI, 31–36."),
        (16, "Лк., 16 зач., IV, 37–44."),
        (18, "Лк., 18 зач., V, 12-16."),
        (21, "Лк., 21 зач., V, 33–39."),
        (23, "Лк., 23 зач., VI, 12–19."),
        (24, "Лк., 24 зач., VI, 17–23."),
        (19, "Лк., 19 зач., V, 17–26."),
    ),
    # week 20
    (
        (30, "Лк., 30 зач., VII, 11–16."),
        (25, "Лк., 25 зач., VI, 24–30."),
        (27, "Лк., 27 зач., VI, 37–45."),
        (28, "Лк., 28 зач., VI, 46 – VII, 1."),
        (31, "Лк., 31 зач., VII, 17–30."),
        (32, "Лк., 32 зач., VII, 31–35."),
        (20, "Лк., 20 зач., V, 27–32."),
    ),
    # week 21
    (
        (35, "Лк., 35 зач., VIII, 5–15."),
        (33, "Лк., 33 зач., VII, 36–50."),
        (34, "Лк., 34 зач., VIII, 1–3."),
        (37, "Лк., 37 зач., VIII, 22–25."),
        (41, "Лк., 41 зач., IX, 7–11."),
        (42, "Лк., 42 зач., IX, 12–18."),
        (22, "Лк., 22 зач., VI, 1–10."),
    ),
    # week 22
    (
        (83, "Лк., 83 зач., XVI, 19–31."),
        (43, "Лк., 43 зач., IX, 18–22."),
        (44, "Лк., 44 зач., IX, 23-27."),
        (47, "Лк., 47 зач., IX, 44–50."),
        (48, "Лк., 48 зач., IX, 49–56."),
        (50, "Лк., 50 зач., X, 1–15."),
        (29, "Лк., 29 зач., VII, 1–10."),
    ),
    # week 23
    (
        (38, "Лк., 38 зач., VIII, 26–39."),
        (52, "Лк., 52 зач., X, 22–24."),
        (55, "Лк., 55 зач., XI, 1–10."),
        (56, "Лк., 56 зач., XI, 9–13."),
        (57, "Лк., 57 зач., XI, 14–23."),
        (58, "Лк., 58 зач., XI, 23–26."),
        (36, "Лк., 36 зач., VIII, 16–21."),
    ),
    # week 24
    (
        (39, "Лк., 39 зач., VIII, 41–56."),
        (59, "Лк., 59 зач., XI, 29–33."),
        (60, "Лк., 60 зач., XI, 34–41."),
        (61, "Лк., 61 зач., XI, 42–46."),
        (62, "Лк., 62 зач., XI, 47 – XII, 1."),
        (63, "Лк., 63 зач., XII, 2–12."),
        (40, "Лк., 40 зач., IX, 1–6."),
    ),
    # week 25
    (
        (53, "Лк., 53 зач., X, 25–37."),
        (65, "Лк., 65 зач., XII, 13–15, 22–31."),
        (68, "Лк., 68 зач., XII, 42–48."),
        (69, "Лк., 69 зач., XII, 48-59."),
        (70, "Лк., 70 зач., XIII, 1–9."),
        (73, "Лк., 73 зач., XIII, 31–35."),
        (46, "Лк., 46 зач., IX, 37–43."),
    ),
    # week 26
    (
        (66, "Лк., 66 зач., XII, 16–21."),
        (75, "Лк., 75 зач., XIV, 12–15."),
        (77, "Лк., 77 зач., XIV, 25–35."),
        (78, "Лк., 78 зач., XV, 1–10."),
        (80, "Лк., 80 зач., XVI, 1-9."),
        (82, "Лк., 82 зач., XVI, 15–18; XVII, 1–4."),
        (49, "Лк., 49 зач., IX, 57–62."),
    ),
    # week 27
    (
        (71, "Лк., 71 зач., XIII, 10–17."),
        (86, "Лк., 86 зач., XVII, 20–25."),
        (87, "Лк., 87 зач., XVII, 26–37."),
        (90, "Лк., 90 зач., XVIII, 15–17, 26–30."),
        (92, "Лк., 92 зач., XVIII, 31–34."),
        (95, "Лк., 95 зач., XIX, 12–28."),
        (51, "Лк., 51 зач., X, 16–21."),
    ),
    # week 28
    (
        (76, "Лк., 76 зач., XIV, 16–24."),
        (97, "Лк., 97 зач., XIX, 37–44."),
        (98, "Лк., 98 зач., XIX, 45–48."),
        (99, "Лк., 99 зач., XX, 1–8."),
        (100, "Лк., 100 зач., XX, 9–18."),
        (101, "Лк., 101 зач., XX, 19-26."),
        (67, "Лк., 67 зач., XII, 32–40."),
    ),
    # week 29
    (
        (85, "Лк., 85 зач., XVII, 12–19."),
        (102, "Лк., 102 зач., XX, 27–44."),
        (106, "Лк., 106 зач., XXI, 12–19."),
        (104, "Лк., 104 зач., XXI, 5–7, 10–11, 20–24."),
        (107, "Лк., 107 зач., XXI, 28–33."),
        (108, "Лк., 108 зач., XXI, 37 – XXII, 8."),
        (72, "Лк., 72 зач., XIII, 18–29."),
    ),
    # week 30
    (
        (91, "Лк., 91 зач., XVIII, 18-27."),
        (33, "Мк., 33 зач., VIII, 11–21."),
        (34, "Мк., 34 зач., VIII, 22–26."),
        (36, "Мк., 36 зач., VIII, 30–34."),
        (39, "Мк., 39 зач., IX, 10–16."),
        (41, "Мк., 41 зач., IX, 33–41."),
        (74, "Лк., 74 зач., XIV, 1–11."),
    ),
    # week 31
    (
        (93, "Лк., 93 зач., XVIII, 35-43."),
        (42, "Мк., 42 зач., IX, 42 – X, 1."),
        (43, "Мк., 43 зач., X, 2–12."),
        (44, "Мк., 44 зач., X, 11–16."),
        (45, "Мк., 45 зач., X, 17–27."),
        (46, "Мк., 46 зач., X, 23–32."),
        (81, "Лк., 81 зач., XVI, 10–15."),
    ),
    # week 32
    (
        (94, "Лк., 94 зач., XIX, 1-10."),
        (48, "Мк., 48 зач., X, 46–52."),
        (50, "Мк., 50 зач., XI, 11–23."),
        (51, "Мк., 51 зач., XI, 23–26."),
        (52, "Мк., 52 зач., XI, 27–33."),
        (53, "Мк., 53 зач., XII, 1–12."),
        (84, "Лк., 84 зач., XVII, 3–10."),
    ),
    # week 33
    (
        (89, "Лк., 89 зач., XVIII, 10–14."),
        (54, "Мк., 54 зач., XII, 13–17."),
        (55, "Мк., 55 зач., XII, 18–27."),
        (56, "Мк., 56 зач., XII, 28–37."),
        (57, "Мк., 57 зач., XII, 38–44."),
        (58, "Мк., 58 зач., XIII, 1–8."),
        (88, "Лк., 88 зач., XVIII, 2–8."),
    ),
    # week 34
    (
        (79, "Лк., 79 зач., XV, 11–32."),
        (59, "Мк., 59 зач., XIII, 9–13."),
        (60, "Мк., 60 зач., XIII, 14-23."),
        (61, "Мк., 61 зач., XIII, 24–31."),
        (62, "Мк., 62 зач., XIII, 31 – XIV, 2."),
        (63, "Мк., 63 зач., XIV, 3-9."),
        (103, "Лк., 103 зач., XX, 45 – XXI, 4."),
    ),
    # week 35
    (
        (106, "Мф., 106 зач., XXV, 31–46."),
        (49, "Мк., 49 зач., XI, 1–11."),
        (64, "Мк., 64 зач., XIV, 10–42."),
        (65, "Мк., 65 зач., XIV, 43 – XV, 1."),
        (66, "Мк., 66 зач., XV, 1–15."),
        (68, "Мк., 68 зач., XV, 22, 25, 33–41."),
        (105, "Лк., 105 зач., XXI, 8–9, 25–27, 33–36."),
    ),
    # week 36
    (
        (17, "Мф., 17 зач., VI, 14–21."),
        (96, "Лк., 96 зач., XIX, 29–40; XXII, 7–39."),
        (109, "Лк., 109 зач., XXII, 39–42, 45 – XXIII, 1."),
        None,
        (110, "Лк., 110 зач., XXIII, 1–34, 44–56."),
        None,
        (16, "Мф., 16 зач., VI, 1–13."),
    ),
)

APOSTLE_WEEKS = (
    # week 0
    (
        (3, "Деян., 3 зач., II, 1–11."),
        None,
        None,
        None,
        None,
        None,
        None,
    ),
    # week 1
    (
        (330, "Евр., 330 зач., XI, 33 – XII, 2."),
        (229, "Еф., 229 зач., V, 8–19."),
        (79, "Рим., 79 зач., I, 1–7, 13–17."),
        (80, "Рим., 80 зач., I, 18–27."),
        (81, "Рим., 81 зач., I, 28 – II, 9."),
        (82, "Рим., 82 зач., II, 14–29."),
        (79, "Рим., 79 зач., I, 7-12."),
    ),
    # week 2
    (
        (81, "Рим., 81 зач., II, 10-16."),
        (83, "Рим., 83 зач., II, 28 – III, 18."),
        (86, "Рим., 86 зач., IV, 4–12."),
        (87, "Рим., 87 зач., IV, 13–25."),
        (89, "Рим., 89 зач., V, 10–16."),
        (90, "Рим., 90 зач., V, 17 – VI, 2."),
        (84, "Рим., 84 зач., III, 19–26."),
    ),
    # week 3
    (
        (88, "Рим., 88 зач., V, 1–10."),
        (94, "Рим., 94 зач., VII, 1–13."),
        (95, "Рим., 95 зач., VII, 14 – VIII, 2."),
        (96, "Рим., 96 зач., VIII, 2–13."),
        (98, "Рим., 98 зач., VIII, 22–27."),
        (101, "Рим., 101 зач., IX, 6–19."),
        (85, "Рим., 85 зач., III, 28 – IV, 3."),
    ),
    # week 4
    (
        (93, "Рим., 93 зач., VI, 18-23."),
        (102, "Рим., 102 зач., IX, 18–33."),
        (104, "Рим., 104 зач., X, 11 – XI, 2."),
        (105, "Рим., 105 зач., XI, 2–12."),
        (106, "Рим., 106 зач., XI, 13–24."),
        (107, "Рим., 107 зач., XI, 25–36."),
        (92, "Рим., 92 зач., VI, 11–17."),
    ),
    # week 5
    (
        (103, "Рим., 103 зач., X, 1–10."),
        (109, "Рим., 109 зач., XII, 4–5, 15–21."),
        (114, "Рим., 114 зач., XIV, 9–18."),
        (117, "Рим., 117 зач., XV, 7–16."),
        (118, "Рим., 118 зач., XV, 17–29."),
        (120, "Рим., 120 зач., XVI, 1–16."),
        (97, "Рим., 97 зач., VIII, 14–21."),
    ),
    # week 6
    (
        (110, "Рим., 110 зач., XII, 6–14."),
        (121, "Рим., 121 зач., XVI, 17–24."),
        (122, "1 Кор., 122 зач., I, 1–9."),
        (127, "1 Кор., 127 зач., II, 9 – III, 8."),
        (129, "1 Кор., 129 зач., III, 18–23."),
        (130, "1 Кор., 130 зач., IV, 5-8."),
        (100, "Рим., 100 зач., IX, 1–5."),
    ),
    # week 7
    (
        (116, "Рим., 116 зач., XV, 1–7."),
        (134, "1 Кор., 134 зач., V, 9 – VI, 11."),
        (136, "1 Кор., 136 зач., VI, 20 – VII, 12."),
        (137, "1 Кор., 137 зач., VII, 12–24."),
        (138, "1 Кор., 138 зач., VII, 24–35."),
        (139, "1 Кор., 139 зач., VII, 35 – VIII, 7."),
        (108, "Рим., 108 зач., XII, 1–3."),
    ),
    # week 8
    (
        (124, "1 Кор., 124 зач., I, 10–18."),
        (142, "1 Кор., 142 зач., IX, 13–18."),
        (144, "1 Кор., 144 зач., X, 5–12."),
        (145, "1 Кор., 145 зач., X, 12–22."),
        (147, "1 Кор., 147 зач., X, 28 – XI, 7."),
        (148, "1 Кор., 148 зач., XI, 8–22."),
        (111, "Рим., 111 зач., XIII, 1–10."),
    ),
    # week 9
    (
        (128, "1 Кор., 128 зач., III, 9–17."),
        (150, "1 Кор., 150 зач., XI, 31 – XII, 6."),
        (152, "1 Кор., 152 зач., XII, 12–26."),
        (154, "1 Кор., 154 зач., XIII, 4 – XIV, 5."),
        (155, "1 Кор., 155 зач., XIV, 6–19."),
        (157, "1 Кор., 157 зач., XIV, 26–40."),
        (113, "Рим., 113 зач., XIV, 6–9."),
    ),
    # week 10
    (
        (131, "1 Кор., 131 зач., IV, 9–16."),
        (159, "1 Кор., 159 зач., XV, 12–19."),
        (161, "1 Кор., 161 зач., XV, 29–38."),
        (165, "1 Кор., 165 зач., XVI, 4–12."),
        (167, "2 Кор., 167 зач., I, 1–7."),
        (169, "2 Кор., 169 зач., I, 12–20."),
        (119, "Рим., 119 зач., XV, 30–33."),
    ),
    # week 11
    (
        (141, "1 Кор., 141 зач., IX, 2–12."),
        (171, "2 Кор., 171 зач., II, 3–15."),
        (172, "2 Кор., 172 зач., II, 14 – III, 3."),
        (173, "2 Кор., 173 зач., III, 4–11."),
        (175, "2 Кор., 175 зач., IV, 1–6."),
        (177, "2 Кор., 177 зач., IV, 13–18."),
        (123, "1 Кор., 123 зач., I, 3–9."),
    ),
    # week 12
    (
        (158, "1 Кор., 158 зач., XV, 1-11."),
        (179, "2 Кор., 179 зач., V, 10–15."),
        (180, "2 Кор., 180 зач., V, 15–21."),
        (182, "2 Кор., 182 зач., VI, 11–16."),
        (183, "2 Кор., 183 зач., VII, 1–10."),
        (184, "2 Кор., 184 зач., VII, 10–16."),
        (125, "1 Кор., 125 зач., I, 18-24."),
    ),
    # week 13
    (
        (166, "1 Кор., 166 зач., XVI, 13–24."),
        (186, "2 Кор., 186 зач., VIII, 7–15."),
        (187, "2 Кор., 187 зач., VIII, 16 – IX, 5."),
        (189, "2 Кор., 189 зач., IX, 12 – X, 7."),
        (190, "2 Кор., 190 зач., X, 7–18."),
        (192, "2 Кор., 192 зач., XI, 5–21."),
        (126, "1 Кор., 126 зач., II, 6–9."),
    ),
    # week 14
    (
        (170, "2 Кор., 170 зач., I, 21 – II, 4."),
        (195, "2 Кор., 195 зач., XII, 10–19."),
        (196, "2 Кор., 196 зач., XII, 20 – XIII, 2."),
        (197, "2 Кор., 197 зач., XIII, 3–13."),
        (198, "Гал., 198 зач., I, 1–10, 20 – II, 5."),
        (201, "Гал., 201 зач., II, 6–10."),
        (130, "1 Кор., 130 зач., IV, 1–5."),
    ),
    # week 15
    (
        (176, "2 Кор., 176 зач., IV, 6–15."),
        (202, "Гал., 202 зач., II, 11–16."),
        (204, "Гал., 204 зач., II, 21 – III, 7."),
        (207, "Гал., 207 зач., III, 15–22."),
        (208, "Гал., 208 зач., III, 23 - IV, 5."),
        (210, "Гал., 210 зач., IV, 8–21."),
        (132, "1 Кор., 132 зач., IV, 17 – V, 5."),
    ),
    # week 16
    (
        (181, "2 Кор., 181 зач., VI, 1–10."),
        (211, "Гал., 211 зач., IV, 28 – V, 10."),
        (212, "Гал., 212 зач., V, 11–21."),
        (214, "Гал., 214 зач., VI, 2–10."),
        (216, "Еф., 216 зач., I, 1–9."),
        (217, "Еф., 217 зач., I, 7–17."),
        (146, "1 Кор., 146 зач., X, 23–28."),
    ),
    # week 17
    (
        (182, "2 Кор., 182 зач., VI, 16 - VII, 1."),
        (219, "Еф., 219 зач., I, 22 – II, 3."),
        (222, "Еф., 222 зач., II, 19 – III, 7."),
        (223, "Еф., 223 зач., III, 8–21."),
        (225, "Еф., 225 зач., IV, 14–19."),
        (226, "Еф., 226 зач., IV, 17–25."),
        (156, "1 Кор., 156 зач., XIV, 20–25."),
    ),
    # week 18
    (
        (188, "2 Кор., 188 зач., IX, 6–11."),
        (227, "Еф., 227 зач., IV, 25–32."),
        (230, "Еф., 230 зач., V, 20–26."),
        (231, "Еф., 231 зач., V, 25–33."),
        (232, "Еф., 232 зач., V, 33 – VI, 9."),
        (234, "Еф., 234 зач., VI, 18–24."),
        (162, "1 Кор., 162 зач., XV, 39–45."),
    ),
    # week 19
    (
        (194, "2 Кор., 194 зач., XI, 31 – XII, 9."),
        (235, "Флп., 235 зач., I, 1–7."),
        (236, "Флп., 236 зач., I, 8–14."),
        (237, "Флп., 237 зач., I, 12–20."),
        (238, "Флп., 238 зач., I, 20–27."),
        (239, "Флп., 239 зач., I, 27 – II, 4."),
        (164, "1 Кор., 164 зач., XV, 58 – XVI, 3."),
    ),
    # week 20
    (
        (200, "Гал., 200 зач., I, 11–19."),
        (241, "Флп., 241 зач., II, 12–16."),
        (242, "Флп., 242 зач., II, 16–23."),
        (243, "Флп., 243 зач., II, 24–30."),
        (244, "Флп., 244 зач., III, 1–8."),
        (245, "Флп., 245 зач., III, 8–19."),
        (168, "2 Кор., 168 зач., I, 8–11."),
    ),
    # week 21
    (
        (203, "Гал., 203 зач., II, 16–20."),
        (248, "Флп., 248 зач., IV, 10–23."),
        (249, "Кол., 249 зач., I, 1–2, 7–11."),
        (251, "Кол., 251 зач., I, 18–23."),
        (252, "Кол., 252 зач., I, 24–29."),
        (253, "Кол., 253 зач., II, 1–7."),
        (174, "2 Кор., 174 зач., III, 12–18."),
    ),
    # week 22
    (
        (215, "Гал., 215 зач., VI, 11–18."),
        (255, "Кол., 255 зач., II, 13–20."),
        (256, "Кол., 256 зач., II, 20 – III, 3."),
        (259, "Кол., 259 зач., III, 17 – IV, 1."),
        (260, "Кол., 260 зач., IV, 2–9."),
        (261, "Кол., 261 зач., IV, 10–18."),
        (178, "2 Кор., 178 зач., V, 1–10."),
    ),
    # week 23
    (
        (220, "Еф., 220 зач., II, 4–10."),
        (262, "1 Сол., 262 зач., I, 1–5."),
        (263, "1 Сол., 263 зач., I, 6–10."),
        (264, "1 Сол., 264 зач., II, 1–8."),
        (265, "1 Сол., 265 зач., II, 9–14."),
        (266, "1 Сол., 266 зач., II, 14–19."),
        (185, "2 Кор., 185 зач., VIII, 1–5."),
    ),
    # week 24
    (
        (221, "Еф., 221 зач., II, 14–22."),
        (267, "1 Сол., 267 зач., II, 20 – III, 8."),
        (268, "1 Сол., 268 зач., III, 9–13."),
        (269, "1 Сол., 269 зач., IV, 1–12."),
        (271, "1 Сол., 271 зач., V, 1–8."),
        (272, "1 Сол., 272 зач., V, 9–13, 24–28."),
        (191, "2 Кор., 191 зач., XI, 1–6."),
    ),
    # week 25
    (
        (224, "Еф., 224 зач., IV, 1–6."),
        (274, "2 Сол., 274 зач., I, 1–10."),
        (274, "2 Сол., 274 зач., I, 10 - II, 2."),
        (275, "2 Сол., 275 зач., II, 1–12."),
        (276, "2 Сол., 276 зач., II, 13 – III, 5."),
        (277, "2 Сол., 277 зач., III, 6–18."),
        (199, "Гал., 199 зач., I, 3–10."),
    ),
    # week 26
    (
        (229, "Еф., 229 зач., V, 8–19."),
        (278, "1 Тим., 278 зач., I, 1–7."),
        (279, "1 Тим., 279 зач., I, 8–14."),
        (281, "1 Тим., 281 зач., I, 18–20; II, 8–15."),
        (283, "1 Тим., 283 зач., III, 1–13."),
        (285, "1 Тим., 285 зач., IV, 4–8, 16."),
        (205, "Гал., 205 зач., III, 8–12."),
    ),
    # week 27
    (
        (233, "Еф., 233 зач., VI, 10–17."),
        (285, "1 Тим., 285 зач., V, 1-10."),
        (286, "1 Тим., 286 зач., V, 11–21."),
        (287, "1 Тим., 287 зач., V, 22 – VI, 11."),
        (289, "1 Тим., 289 зач., VI, 17–21."),
        (290, "2 Тим., 290 зач., I, 1–2, 8–18."),
        (213, "Гал., 213 зач., V, 22 – VI, 2."),
    ),
    # week 28
    (
        (250, "Кол., 250 зач., I, 12–18."),
        (294, "2 Тим., 294 зач., II, 20–26."),
        (297, "2 Тим., 297 зач., III, 16 – IV, 4."),
        (299, "2 Тим., 299 зач., IV, 9–22."),
        (300, "Тит., 300 зач., I, 5 - II, 1."),
        (301, "Тит., 301 зач., I, 15 – II, 10."),
        (218, "Еф., 218 зач., I, 16–23."),
    ),
    # week 29
    (
        (257, "Кол., 257 зач., III, 4-11."),
        (308, "Евр., 308 зач., III, 5–11, 17–19."),
        (310, "Евр., 310 зач., IV, 1–13."),
        (312, "Евр., 312 зач., V, 11 – VI, 8."),
        (315, "Евр., 315 зач., VII, 1–6."),
        (317, "Евр., 317 зач., VII, 18–25."),
        (220, "Еф., 220 зач., II, 11-13."),
    ),
    # week 30
    (
        (258, "Кол., 258 зач., III, 12–16."),
        (319, "Евр., 319 зач., VIII, 7–13."),
        (321, "Евр., 321 зач., IX, 8–10, 15–23."),
        (323, "Евр., 323 зач., X, 1–18."),
        (326, "Евр., 326 зач., X, 35 – XI, 7."),
        (327, "Евр., 327 зач., XI, 8, 11–16."),
        (228, "Еф., 228 зач., V, 1–8."),
    ),
    # week 31
    (
        (280, "1 Тим., 280 зач., I, 15-17."),
        (329, "Евр., 329 зач., XI, 17–23, 27–31."),
        (333, "Евр., 333 зач., XII, 25–26; XIII, 22–25."),
        (50, "Иак., 50 зач., I, 1-18."),
        (51, "Иак., 51 зач., I, 19-27."),
        (52, "Иак., 52 зач., II, 1–13."),
        (249, "Кол., 249 зач., I, 3-6."),
    ),
    # week 32
    (
        (285, "1 Тим., 285 зач., IV, 9-15."),
        (53, "Иак., 53 зач., II, 14–26."),
        (54, "Иак., 54 зач., III, 1–10."),
        (55, "Иак., 55 зач., III, 11 – IV, 6."),
        (56, "Иак., 56 зач., IV, 7 – V, 9."),
        (58, "1 Пет., 58 зач., I, 1–2, 10–12; II, 6–10."),
        (273, "1 Сол., 273 зач., V, 14–23."),
    ),
    # week 33
    (
        (296, "2 Тим., 296 зач., III, 10–15."),
        (59, "1 Пет., 59 зач., II, 21 – III, 9."),
        (60, "1 Пет., 60 зач., III, 10–22."),
        (61, "1 Пет., 61 зач., IV, 1–11."),
        (62, "1 Пет., 62 зач., IV, 12 – V, 5."),
        (64, "2 Пет., 64 зач., I, 1–10."),
        (293, "2 Тим., 293 зач., II, 11–19."),
    ),
    # week 34
    (
        (135, "1 Кор., 135 зач., VI, 12-20."),
        (66, "2 Пет., 66 зач., I, 20 – II, 9."),
        (67, "2 Пет., 67 зач., II, 9–22."),
        (68, "2 Пет., 68 зач., III, 1–18."),
        (69, "1 Ин., 69 зач., I, 8 – II, 6."),
        (70, "1 Ин., 70 зач., II, 7–17."),
        (295, "2 Тим., 295 зач., III, 1–9."),
    ),
    # week 35
    (
        (140, "1 Кор., 140 зач., VIII, 8 – IX, 2."),
        (71, "1 Ин., 71 зач., II, 18 – III, 10."),
        (72, "1 Ин., 72 зач., III, 10–20."),
        (73, "1 Ин., 73 зач., III, 21 – IV, 6."),
        (74, "1 Ин., 74 зач., IV, 20 – V, 21."),
        (75, "2 Ин., 75 зач., I, 1–13."),
        (146, "1 Кор., 146 зач., X, 23–28."),
    ),
    # week 36
    (
        (112, "Рим., 112 зач., XIII, 11 – XIV, 4."),
        (76, "3 Ин., 76 зач., I, 1–15."),
        (77, "Иуд., 77 зач., I, 1–10."),
        None,
        (78, "Иуд., 78 зач., I, 11–25."),
        None,
        (115, "Рим., 115 зач., XIV, 19–26."),
    ),
)

GOSPEL_MOVABLE = {
    1: (1, "Ин., 1 зач., I, 1–17."),
    2: (2, "Ин., 2 зач., I, 18–28."),
    3: (113, "Лк., 113 зач., XXIV, 12–35."),
    4: (4, "Ин., 4 зач., I, 35–51."),
    5: (8, "Ин., 8 зач., III, 1–15."),
    6: (7, "Ин., 7 зач., II, 12–22."),
    7: (11, "Ин., 11 зач., III, 22–33."),
    8: (65, "Ин., 65 зач., XX, 19–31."),
    9: (6, "Ин., 6 зач., II, 1–11."),
    10: (10, "Ин., 10 зач., III, 16–21."),
    11: (15, "Ин., 15 зач., V, 17–24."),
    12: (16, "Ин., 16 зач., V, 24–30."),
    13: (17, "Ин., 17 зач., V, 30 – VI, 2."),
    14: (19, "Ин., 19 зач., VI, 14–27."),
    15: (69, "Мк., 69 зач., XV, 43–47."),
    16: (13, "Ин., 13 зач., IV, 46–54."),
    17: (20, "Ин., 20 зач., VI, 27–33."),
    18: (21, "Ин., 21 зач., VI, 35–39."),
    19: (22, "Ин., 22 зач., VI, 40–44."),
    20: (23, "Ин., 23 зач., VI, 48–54."),
    21: (52, "Ин., 52 зач., XV, 17 – XVI, 2."),
    22: (14, "Ин., 14 зач., V, 1–15."),
    23: (24, "Ин., 24 зач., VI, 56–69."),
    24: (25, "Ин., 25 зач., VII, 1–13."),
    25: (26, "Ин., 26 зач., VII, 14–30."),
    26: (29, "Ин., 29 зач., VIII, 12–20."),
    27: (30, "Ин., 30 зач., VIII, 21–30."),
    28: (31, "Ин., 31 зач., VIII, 31–42."),
    29: (12, "Ин., 12 зач., IV, 5–42."),
    30: (32, "Ин., 32 зач., VIII, 42–51."),
    31: (33, "Ин., 33 зач., VIII, 51–59."),
    32: (18, "Ин., 18 зач., VI, 5–14."),
    33: (35, "Ин., 35 зач., IX, 39 – X, 9."),
    34: (37, "Ин., 37 зач., X, 17–28."),
    35: (38, "Ин., 38 зач., X, 27–38."),
    36: (34, "Ин., 34 зач., IX, 1–38."),
    37: (40, "Ин., 40 зач., XI, 47–57."),
    38: (42, "Ин., 42 зач., XII, 19–36."),
    39: (43, "Ин., 43 зач., XII, 36–47."),
    40: (114, "Лк., 114 зач., XXIV, 36–53."),
    41: (47, "Ин., 47 зач., XIV, 1–11."),
    42: (48, "Ин., 48 зач., XIV, 10–21."),
    43: (56, "Ин., 56 зач., XVII, 1–13."),
    44: (49, "Ин., 49 зач., XIV, 27 – XV, 7."),
    45: (53, "Ин., 53 зач., XVI, 2–13."),
    46: (54, "Ин., 54 зач., XVI, 15–23."),
    47: (55, "Ин., 55 зач., XVI, 23–33."),
    48: (57, "Ин., 57 зач., XVII, 18–26."),
    49: (67, "Ин., 67 зач., XXI, 15–25."),
    92: (10, "Мк., 10 зач., II, 23 – III, 5."),
    93: (5, "Ин., 5 зач., I, 43–51."),
    99: (6, "Мк., 6 зач., I, 35–44."),
    100: (7, "Мк., 7 зач., II, 1–12."),
    106: (8, "Мк., 8 зач., II, 14–17."),
    107: (37, "Мк., 37 зач., VIII, 34 – IX, 1."),
    113: (31, "Мк., 31 зач., VII, 31–37."),
    114: (40, "Мк., 40 зач., IX, 17–31."),
    120: (35, "Мк., 35 зач., VIII, 27–31."),
    121: (47, "Мк., 47 зач., X, 32–45."),
    127: (39, "Ин., 39 зач., XI, 1–45."),
    128: (41, "Ин., 41 зач., XII, 1–18."),
    129: (98, "Мф., 98 зач., XXIV, 3–35."),
    130: (102, "Мф., 102 зач., XXIV, 36 - XXVI, 2."),
    131: (108, "Мф., 108 зач., XXVI, 6-16."),
    132: (107, "Мф., 107 зач., XXVI, 1–20. Ин., 44 зач., XIII, 3–17. Мф., 108 зач.(от полу́), XXVI, 21–39. Лк., 109 зач., XXII, 43–45. Мф., 108 зач., XXVI, 40 – XXVII, 2."),
    134: (115, "Мф., 115 зач., XXVIII, 1–20."),
}

APOSTLE_MOVABLE = {
    1: (1, "Деян., 1 зач., I, 1–8."),
    2: (2, "Деян., 2 зач., I, 12–17, 21–26."),
    3: (4, "Деян., 4 зач., II, 14–21."),
    4: (5, "Деян., 5 зач., II, 22–36."),
    5: (6, "Деян., 6 зач., II, 38–43."),
    6: (7, "Деян., 7 зач., III, 1–8."),
    7: (8, "Деян., 8 зач., III, 11–16."),
    8: (14, "Деян., 14 зач., V, 12–20."),
    9: (9, "Деян., 9 зач., III, 19–26."),
    10: (10, "Деян., 10 зач., IV, 1–10."),
    11: (11, "Деян., 11 зач., IV, 13–22."),
    12: (12, "Деян., 12 зач., IV, 23–31."),
    13: (13, "Деян., 13 зач., V, 1–11."),
    14: (15, "Деян., 15 зач., V, 21–33."),
    15: (16, "Деян., 16 зач., VI, 1-7."),
    16: (17, "Деян., 17 зач., VI, 8 – VII, 5, 47–60."),
    17: (18, "Деян., 18 зач., VIII, 5–17."),
    18: (19, "Деян., 19 зач., VIII, 18–25."),
    19: (20, "Деян., 20 зач., VIII, 26–39."),
    20: (21, "Деян., 21 зач., VIII, 40 – IX, 19."),
    21: (22, "Деян., 22 зач., IX, 19–31."),
    22: (23, "Деян., 23 зач., IX, 32-42."),
    23: (24, "Деян., 24 зач., X, 1–16."),
    24: (25, "Деян., 25 зач., X, 21–33."),
    25: (34, "Деян., 34 зач., XIV, 6–18."),
    26: (26, "Деян., 26 зач., X, 34–43."),
    27: (27, "Деян., 27 зач., X, 44 – XI, 10."),
    28: (29, "Деян., 29 зач., XII, 1–11."),
    29: (28, "Деян., 28 зач., XI, 19–26, 29–30."),
    30: (30, "Деян., 30 зач., XII, 12–17."),
    31: (31, "Деян., 31 зач., XII, 25 – XIII, 12."),
    32: (32, "Деян., 32 зач., XIII, 13–24."),
    33: (35, "Деян., 35 зач., XIV, 20–27."),
    34: (36, "Деян., 36 зач., XV, 5–34."),
    35: (37, "Деян., 37 зач., XV, 35–41."),
    36: (38, "Деян., 38 зач., XVI, 16–34."),
    37: (39, "Деян., 39 зач., XVII, 1–15."),
    38: (40, "Деян., 40 зач., XVII, 19-28."),
    39: (41, "Деян., 41 зач., XVIII, 22–28."),
    40: (1, "Деян., 1 зач., I, 1–12."),
    41: (42, "Деян., 42 зач., XIX, 1–8."),
    42: (43, "Деян., 43 зач., XX, 7–12."),
    43: (44, "Деян., 44 зач., XX, 16-18, 28-36."),
    44: (45, "Деян., 45 зач., XXI, 8–14."),
    45: (46, "Деян., 46 зач., XXI, 26–32."),
    46: (47, "Деян., 47 зач., XXIII, 1–11."),
    47: (48, "Деян., 48 зач., XXV, 13–19."),
    48: (50, "Деян., 50 зач., XXVII, 1–44."),
    49: (51, "Деян., 51 зач., XXVIII, 1–31."),
    92: (303, "Евр., 303 зач., I, 1–12."),
    93: (329, "Евр., 329 зач., XI, 24-26, 32 - XII, 2."),
    99: (309, "Евр., 309 зач., III, 12–16."),
    100: (304, "Евр., 304 зач., I, 10 – II, 3."),
    106: (325, "Евр., 325 зач., X, 32–38."),
    107: (311, "Евр., 311 зач., IV, 14 – V, 6."),
    113: (313, "Евр., 313 зач., VI, 9–12."),
    114: (314, "Евр., 314 зач., VI, 13–20."),
    120: (322, "Евр., 322 зач., IX, 24–28."),
    121: (321, "Евр., 321 зач., IX, 11-14."),
    127: (333, "Евр., 333 зач., XII, 28 - XIII, 8."),
    128: (247, "Флп., 247 зач., IV, 4-9."),
    132: (149, "1 Кор., 149 зач., XI, 23–32."),
    134: (91, "Рим., 91 зач., VI, 3–11."),
}
