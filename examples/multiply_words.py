#!/usr/bin/env python3
"""
Multiply words in a Coxeter group given by type name and print normal forms.

Example:
  python3 multiply_words.py H3 1,2,3,2 2,1
  python3 multiply_words.py "A~2" 1,2,3 1,2,3 --power 4
"""

import argparse

from coxgroups import build_group, coxeter_matrix_from_type


def parse_word(s):
    return [int(x) for x in s.split(",") if x.strip()]


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("type")
    parser.add_argument("words", nargs="+", help="Comma-separated generator indices, e.g. 1,2,1")
    parser.add_argument("--power", type=int, default=1)
    args = parser.parse_args()

    W, _ = build_group(coxeter_matrix_from_type(args.type))
    print(W)

    product = W.identity()
    for word in args.words:
        w = W.element(parse_word(word))
        print(f"  {word:>12} -> ShortLex {w.short_lex()}  length {w.length()}")
        product = product * w

    result = product ** args.power
    print(f"product^{args.power}: ShortLex {result.short_lex()}, "
          f"InverseShortLex {result.inverse_short_lex()}, length {result.length()}")
    descents = [s for s in range(1, W.rank + 1) if result.is_right_descent(s)]
    print(f"right descents: {descents}")


if __name__ == "__main__":
    main()
