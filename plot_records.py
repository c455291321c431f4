#!/usr/bin/env python3
import argparse
import math

import matplotlib.pyplot as plt

from record_search import Record, search_records


def collect_records(stop: int) -> list[Record]:
    return list(search_records(stop=stop))


def plot_records(records: list[Record], out: str | None = None):
    # -log10(error) ~ number of matching leading digits
    xs = [r.tens_exp for r in records]
    ys = [-math.log10(r.error) for r in records]

    fig = plt.figure(figsize=(10, 5))
    plt.plot(xs, ys, marker="o", color="blue", linewidth=1)
    for r, x, y in zip(records, xs, ys):
        plt.annotate(f"2**{r.twos_exp}", (x, y), textcoords="offset points",
                     xytext=(4, -10), fontsize=8)
    plt.xscale("log")
    plt.title("Record approximations 10**n ~ 2**m")
    plt.xlabel("Tens exponent n")
    plt.ylabel("-log10(relative error)")
    plt.grid(True)
    plt.tight_layout()
    if out:
        fig.savefig(out)
        plt.close(fig)
    else:
        plt.show()
    return fig


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Plot record errors of 10**n ~ 2**m")
    parser.add_argument("--stop", type=int, default=13000,
                        help="Last tens exponent to search (default 13000)")
    parser.add_argument("--out", help="Save the figure here instead of showing it")
    args = parser.parse_args(argv)

    if args.stop < 1:
        parser.error("--stop must be at least 1")
    print(f"Searching up to 10**{args.stop}…", end="", flush=True)
    records = collect_records(args.stop)
    print(f" {len(records)} records.")
    plot_records(records, args.out)


if __name__ == "__main__":
    main()
