# Standard library imports
import argparse
from pathlib import Path
from typing import Optional, Sequence

# Third-party imports
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # noqa: E402

# Local application imports
from densitybox.dataloader import get_config, load_sample  # noqa: E402
from densitybox.exceptions import ConfigError, DensityBoxError  # noqa: E402
from densitybox.library import Logger  # noqa: E402
from densitybox.plots import fig_to_base64, plot_density_box  # noqa: E402

OUTPUT_FORMATS = (".png", ".svg", ".pdf", ".html")


def get_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Density plot with a box-plot band for one numeric column"
    )
    parser.add_argument("--file", type=Path, required=True, help="CSV or Excel data file")
    parser.add_argument("--column", type=str, required=True, help="Column to plot")
    parser.add_argument("--weights", type=str, required=False, help="Column with observation weights")
    parser.add_argument("--config", type=Path, required=False, help="Path to config file (.yaml)")
    parser.add_argument("--coef", type=float, required=False, help="Fence coefficient (default 1.5)")
    parser.add_argument("--log", action="store_true", help="Summarise log(column)")
    parser.add_argument("--normal", action="store_true", help="Overlay a comparison normal curve")
    parser.add_argument("--label", type=str, required=False, help="Legend label")
    parser.add_argument(
        "--output",
        type=Path,
        required=True,
        help=f"Output file ({', '.join(OUTPUT_FORMATS)})",
    )
    parser.add_argument("--log-file", type=Path, required=False, help="Write a log file")
    parser.add_argument("--verbose", action="store_true", help="Show debug messages")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Command line entry point.
    Loads the configuration and the data column, draws the figure and saves it.
    """
    args = get_args(argv)
    logger = Logger(
        level_console=Logger.DEBUG if args.verbose else Logger.INFO,
        level_file=Logger.DEBUG,
        filename=args.log_file or "",
    )

    try:
        if args.output.suffix.lower() not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Unsupported output format '{args.output.suffix}', expected one of {OUTPUT_FORMATS}"
            )
        config = get_config(
            config_file=args.config,
            coef=args.coef,
            transform="log" if args.log else None,
            normal=True if args.normal else None,
            legend_label=args.label,
        )
        for key, value in config:
            logger.debug(f"option {key} = {value}")

        values, weights = load_sample(
            file_path=args.file,
            column=args.column,
            weights_column=args.weights,
            logger=logger,
        )
        fig = plot_density_box(values, weights=weights, config=config, logger=logger)

        args.output.parent.mkdir(parents=True, exist_ok=True)
        if args.output.suffix.lower() == ".html":
            args.output.write_text(fig_to_base64(fig, alt_text=args.column), encoding="utf-8")
        else:
            fig.savefig(args.output, bbox_inches="tight")
            plt.close(fig)
        logger.info(f"[BLUE]- Figure saved to {args.output}")
        return 0

    except (DensityBoxError, FileNotFoundError, KeyError) as e:
        logger.error(str(e))
        return 1
    finally:
        logger.close()


if __name__ == "__main__":
    raise SystemExit(main())
