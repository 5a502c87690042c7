import argparse
import logging
import sys

from .seq_alignment import PairwiseAligner


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="memoalign",
        description="Optimal global alignment of two strings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  memoalign AC AGC 2 -1 -1
  memoalign GATTACA GCATGCU 1 -1 -1 --plot memo.png
        """,
    )
    parser.add_argument("s1", help="First string (rows of the memo table)")
    parser.add_argument("s2", help="Second string (columns of the memo table)")
    parser.add_argument("match", type=int, help="Score for two equal symbols")
    parser.add_argument("mismatch", type=int, help="Score for two different symbols")
    parser.add_argument("gap", type=int, help="Score for a symbol against a gap")
    parser.add_argument(
        "--method",
        choices=("iterative", "recursive"),
        default="iterative",
        help="Fill the memo table bottom-up or by memoized recursion (default: iterative)",
    )
    parser.add_argument(
        "--no-flush",
        action="store_true",
        help="Stop the traceback at the first row/column boundary instead of padding with gaps",
    )
    parser.add_argument("--plot", metavar="PATH", help="Save a heatmap of the memo table to PATH")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output (show debug information)",
    )

    args = parser.parse_args(argv)

    # Configure logging
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
        logging.getLogger("MemoAlign").setLevel(logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        aligner = PairwiseAligner(
            args.match, args.mismatch, args.gap,
            method=args.method, flush=not args.no_flush,
        )
        result = aligner.align(args.s1, args.s2, verbose=True)
    except (ValueError, TypeError, RecursionError) as e:
        logging.error(f"Error during alignment: {e}")
        return 1

    if args.plot:
        import matplotlib.pyplot as plt

        from .seq_alignment.memo_plot import plot_memo
        from .seq_alignment.scoring import with_placeholder

        fig = plot_memo(
            result.table,
            with_placeholder(args.s1),
            with_placeholder(args.s2),
            penalties=result.penalties,
            path=args.plot,
            title=f"score = {result.score}",
        )
        plt.close(fig)
        logging.info(f"Memo table plot written: {args.plot}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
