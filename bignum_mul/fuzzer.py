import argparse
import logging
import os
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from random import Random
from typing import List, Optional, Sequence

import primefac

from .errors import InvariantError
from .radix import Radix, from_digits, to_digits
from .strategy import MULTIPLIERS, cross_check

CURRENT_PATH = Path(os.getcwd())
ERROR_INPUT = (CURRENT_PATH / 'error.txt').resolve()

SHAPES = ['random', 'max', 'sparse', 'prime']
PRIME_DIGITS = 16


@dataclass
class Result:
    success: Optional[str] = None
    error: Optional[str] = None


def next_prime(n: int) -> int:
    """Smallest prime strictly greater than ``n``."""
    p = n + 1
    while not primefac.isprime(p):
        p += 1
    return p


def random_operand(rng: Random, radix: Radix, length: int, shape: str = 'random') -> List[int]:
    if length <= 0:
        return []
    match shape:
        case 'max':
            return [radix.max_digit] * length
        case 'sparse':
            n = [0] * length
            for i in range(0, length, 2):
                n[i] = rng.randint(1, radix.max_digit)
            n[-1] = n[-1] or 1
            return n
        case 'prime':
            length = min(length, PRIME_DIGITS)
            low = 1 << (radix.bits * (length - 1))
            p = next_prime(rng.randint(low, (low << radix.bits) - 1))
            return to_digits(p, radix)
        case 'random':
            n = [rng.randint(0, radix.max_digit) for _ in range(length)]
            while n[-1] == 0:
                n[-1] = rng.randint(0, radix.max_digit)
            return n
    raise ValueError(f"unknown operand shape {shape!r}, expected one of {SHAPES}")


def short(n: Sequence[int], radix: Radix) -> str:
    t = hex(from_digits(n, radix))
    if len(t) > 50:
        t = t[:50] + '...'
    return t


def print_error(a: Sequence[int], b: Sequence[int], radix: Radix, err: str, path: Path = ERROR_INPUT) -> None:
    with open(path, 'w') as f:
        f.write(f"{radix.bits}\n")
        f.write(hex(from_digits(a, radix)))
        f.write('\n')
        f.write(hex(from_digits(b, radix)))
        f.write('\n')
    print(f"{short(a, radix)} * {short(b, radix)} -- \x1b[31mFAILED\x1b[0m\n\t{err}")


def print_success(a: Sequence[int], b: Sequence[int], radix: Radix, took: str) -> None:
    print(f"{short(a, radix)} * {short(b, radix)} -- \x1b[32mPASSED\x1b[0m\n\tTook {took}")


def check_pair(a: Sequence[int], b: Sequence[int], radix: Radix, names: Sequence[str]) -> Result:
    start = time.perf_counter()
    try:
        product = cross_check(a, b, radix, names)
        cross_check(b, a, radix, names)
    except InvariantError as e:
        return Result(error=str(e))
    if from_digits(product, radix) != from_digits(a, radix) * from_digits(b, radix):
        return Result(error="schoolbook product disagrees with int multiplication")
    return Result(success=f"{(time.perf_counter() - start) * 1000:.3f}ms")


def run(rounds: int, step: int, bits: Sequence[int], shapes: Sequence[str], names: Sequence[str],
        seed: str = "BigNum", error_path: Path = ERROR_INPUT) -> bool:
    rng = Random(seed)
    len1 = 1
    len2 = 1
    for _ in range(rounds):
        len1 += rng.randint(1, step)
        len2 += rng.randint(1, step)
        print(f"Testing for number that has length: {len1=}, {len2=}")

        for w in bits:
            radix = Radix(w)
            for shape in shapes:
                a = random_operand(rng, radix, len1, shape)
                b = random_operand(rng, radix, len2, shape)
                res = check_pair(a, b, radix, names)
                if res.error:
                    print_error(a, b, radix, res.error, error_path)
                    return False
                print_success(a, b, radix, res.success or '')
    return True


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="Fuzzer")
    parser.add_argument('-r', '--rounds', type=int, default=10, help="Number of rounds to run.")
    parser.add_argument('-s', '--step', type=int, default=100, help="Max digits added to each operand per round.")
    parser.add_argument('-b', '--bits', type=int, nargs='+', default=[32], help="Digit widths to test.")
    parser.add_argument('--shape', choices=SHAPES, nargs='+', default=['random'], help="Operand shapes.")
    parser.add_argument('-m', '--method', choices=sorted(MULTIPLIERS), nargs='+',
                        default=['balance', 'karatsuba'], help="Methods checked against the schoolbook product.")
    parser.add_argument('--seed', default="BigNum", help="Random seed.")
    parser.add_argument('-v', '--verbose', action=argparse.BooleanOptionalAction, help="Debug logging.")

    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(asctime)s %(name)s %(levelname)s %(message)s")
    ok = run(args.rounds, args.step, args.bits, args.shape, args.method, seed=args.seed)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
