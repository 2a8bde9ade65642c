#!/usr/bin/env python3
"""
Benchmark script for year building and cached calendar lookups.

Reports the cost of building single years across a span of the Paschal
cycle, how much the year cache saves per query, and what a multi-year period
search costs with a cold and with a warm cache.
"""

import json
import datetime
import statistics
import timeit

from paschalion import markers as mk
from paschalion._common import GREGORIAN, MILANKOVIC
from paschalion.orthodox import OrthodoxCalendar
from paschalion.pascha import julian_pascha
from paschalion.year import build_year, Options

# Every 19th year of one Paschal cycle touches all Pascha dates several times
BUILD_YEARS = range(1900, 1900 + 532, 19)
BIG_YEAR = "123456789012345678901234567890"
PERIOD = ((2000, 1, 1), (2099, 12, 31))
QUERY_ITERATIONS = 20000


def time_build(year, options=None, repeat=5):
    """Best of ``repeat`` single builds of ``year``, in milliseconds."""
    if options is None:
        timer = timeit.Timer(lambda: build_year(year))
    else:
        timer = timeit.Timer(lambda: build_year(year, options))
    return min(timer.repeat(repeat=repeat, number=1)) * 1000


def build_costs():
    """Per-year build cost over ``BUILD_YEARS``."""
    costs = {year: time_build(year) for year in BUILD_YEARS}
    slowest = max(costs, key=costs.get)
    return {
        'years': len(costs),
        'mean_ms': statistics.mean(costs.values()),
        'min_ms': min(costs.values()),
        'max_ms': costs[slowest],
        'slowest_year': slowest,
        'slowest_pascha': "%d-%d" % julian_pascha(slowest),
        'big_year_ms': time_build(BIG_YEAR),
        'indented_ms': time_build(2024, Options(apostle_spring_indent=True)),
    }


def query_costs():
    """Microseconds per cached query against one build of the same year."""
    cal = OrthodoxCalendar()
    cal.glas(2024, 1, 1)
    cal.glas(2024, 1, 1, GREGORIAN)
    queries = [
        ("glas", lambda: cal.glas(2024, 5, 5)),
        ("gospel", lambda: cal.gospel(2024, 5, 5)),
        ("properties_gregorian", lambda: cal.properties(2024, 5, 5,
                                                        GREGORIAN)),
        ("properties_milankovic", lambda: cal.properties(2024, 5, 5,
                                                         MILANKOVIC)),
        ("date_with", lambda: cal.date_with(2024, mk.PASHA)),
        ("jdn", lambda: cal.jdn(2024, 4, 22)),
    ]
    results = {}
    for name, query in queries:
        seconds = timeit.timeit(query, number=QUERY_ITERATIONS)
        results[name] = seconds / QUERY_ITERATIONS * 1e6
    return results


def period_costs():
    """One century of Pascha dates, building every year versus reusing
    them."""
    first, last = PERIOD
    cal = OrthodoxCalendar()
    start = timeit.default_timer()
    found = cal.dates_in_period_with(first, last, mk.PASHA)
    cold = timeit.default_timer() - start
    start = timeit.default_timer()
    cal.dates_in_period_with(first, last, mk.PASHA)
    warm = timeit.default_timer() - start
    return {'dates': len(found), 'cold_ms': cold * 1000,
            'warm_ms': warm * 1000}


def run_benchmarks():
    print("=" * 60)
    print("YEAR BUILD AND CACHE BENCHMARK")
    print("=" * 60)

    builds = build_costs()
    print(f"Year builds ({builds['years']} years from {BUILD_YEARS.start})")
    print(f"  mean {builds['mean_ms']:8.2f} ms   min {builds['min_ms']:8.2f}"
          f" ms   max {builds['max_ms']:8.2f} ms")
    print(f"  slowest year {builds['slowest_year']}"
          f" (Pascha {builds['slowest_pascha']})")
    print(f"  30-digit year {builds['big_year_ms']:8.2f} ms,"
          f" Apostle indent on {builds['indented_ms']:8.2f} ms")

    print("-" * 60)
    queries = query_costs()
    print("Cached queries (us per call)")
    for name, micros in queries.items():
        print(f"  {name:24s} {micros:8.2f}")
    speedup = builds['mean_ms'] * 1000 / queries['glas']
    print(f"  a cached glas lookup is {speedup:,.0f}x cheaper than a build")

    print("-" * 60)
    period = period_costs()
    print(f"Pascha dates {PERIOD[0][0]}-{PERIOD[1][0]}: {period['dates']}"
          f" found, cold {period['cold_ms']:.1f} ms,"
          f" warm {period['warm_ms']:.1f} ms")
    print("=" * 60)

    return {'builds': builds, 'queries_us': queries, 'period': period}


if __name__ == "__main__":
    results = run_benchmarks()

    output = {
        'timestamp': datetime.datetime.now().isoformat(),
        'results': results
    }

    with open('benchmark_year_cache_results.json', 'w') as f:
        json.dump(output, f, indent=2)

    print("\nResults saved to benchmark_year_cache_results.json")
