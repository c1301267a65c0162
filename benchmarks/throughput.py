"""
Benchmark: measure parse throughput of LF2 object data files.
Parses each file repeatedly and reports frames/second.

Usage:
    python benchmarks/throughput.py data/*.dat
    python benchmarks/throughput.py --repeat 20 data/davis.dat
"""
import argparse
import time

from lf2_parse.errors import ObjectDataError
from lf2_parse.object_data import ObjectData


def benchmark_file(path, n_repeat=10):
    print(f"\n{'='*60}")
    print(f"  {path}  |  {n_repeat} parses")
    print(f"{'='*60}")

    t0 = time.time()
    text = ObjectData.open(path)
    t_open = time.time() - t0
    print(f"  Open + decode: {t_open * 1000:.1f}ms ({len(text):,} chars)")

    # Warmup
    object_data = ObjectData.try_from(text)
    n_frames = len(object_data.frames)

    t0 = time.time()
    for _ in range(n_repeat):
        ObjectData.try_from(text)
    elapsed = time.time() - t0

    fps = n_frames * n_repeat / elapsed
    print(f"  {n_frames} frames, {elapsed / n_repeat * 1000:.1f}ms per parse")
    print(f"  Throughput: {fps:,.0f} frames/sec")
    return fps


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Parse throughput benchmark')
    parser.add_argument('paths', nargs='+')
    parser.add_argument('--repeat', type=int, default=10)
    args = parser.parse_args()

    for path in args.paths:
        try:
            benchmark_file(path, n_repeat=args.repeat)
        except ObjectDataError as e:
            print(f"  ERROR: {e}")

    print(f"\n{'='*60}")
    print("  Done.")
