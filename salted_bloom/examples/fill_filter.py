# ==================================================
# examples/fill_filter.py
# ==================================================
import argparse, logging
from salted_bloom import BloomFilter
from salted_bloom.const import DEFAULT_DIGEST
from salted_bloom.digest import DIGESTS

def main(argv=None):
    p = argparse.ArgumentParser(description="fill a filter and measure false positives")
    p.add_argument("capacity", type=int)
    p.add_argument("error_rate", type=float)
    p.add_argument("--probes", type=int, default=100_000, help="never-added keys to test")
    p.add_argument("--seed", type=int, default=None, help="salt seed")
    p.add_argument("--digest", choices=sorted(DIGESTS), default=DEFAULT_DIGEST)
    p.add_argument("-v", "--verbose", action="store_true")
    args = p.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    bf = BloomFilter(args.capacity, args.error_rate, rng=args.seed, digest=args.digest)
    for i in range(args.capacity):
        bf.add(f"key_{i}")

    hits = sum(bf.check(f"probe_{i}") for i in range(args.probes))
    print(f"m={bf.filter_length} bits  k={bf.num_hash_funcs}  digest={bf.digest_name}  "
          f"fill={bf.fill_ratio():.3f}")
    print(f"false positives: {hits}/{args.probes} = {hits / max(1, args.probes):.5f} "
          f"(target {args.error_rate}, estimate {bf.estimated_error_rate():.5f})")
    return hits

if __name__ == "__main__":
    main()
