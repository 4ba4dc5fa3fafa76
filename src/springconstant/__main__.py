"""Command-line interface."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from springconstant import config
from springconstant.logging_config import LOG_FORMATS, setup_logging
from springconstant.model.parameters import MaterialParameters
from springconstant.model.spring import SpringMaterial
from springconstant.model.sweeps import TemperatureSweep, multi_temperature_time_sweep

logger = logging.getLogger("springconstant.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="springconstant",
        description="Spring constant of a steel rod versus temperature and time",
    )
    parser.add_argument('--params', metavar='PATH', help='JSON file overriding material parameters')
    parser.add_argument(
        '--output-dir', metavar='DIR', nargs='?', const=config.default_output_path(),
        help=f'Save figures to DIR instead of showing them (default DIR: ./{config.OUTPUT_FOLDER_NAME})'
    )
    parser.add_argument('--no-plot', action='store_true', help='Only evaluate the sweeps')
    parser.add_argument(
        '--log-level', default='INFO',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'], help='Logging level (default: INFO)'
    )
    parser.add_argument('--log-file', metavar='PATH', help='Also write the log to PATH')
    parser.add_argument('--log-format', default='default', choices=list(LOG_FORMATS), help='Log record layout')
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level), log_file=args.log_file, log_format=args.log_format)

    try:
        parameters = MaterialParameters.from_json(args.params) if args.params else MaterialParameters()
        material = SpringMaterial(parameters)

        for line in parameters.describe():
            logger.info(line)

        temperature_sweep = TemperatureSweep(material)
        time_sweeps = multi_temperature_time_sweep(material)

        temperatures, k = temperature_sweep.arrays()
    except (IOError, ValueError) as e:
        # DomainError is a ValueError
        logger.error(str(e))
        return 2

    logger.info(f"k(T0 = {parameters.T0:g} °C) = {material.spring_constant(parameters.T0):.6g} N/m")
    logger.info(
        f"k over [{temperatures[0]:g}, {temperatures[-1]:g}] °C: "
        f"min {k.min():.6g} N/m, max {k.max():.6g} N/m"
    )
    for T, sweep in time_sweeps.items():
        times, k_t = sweep.arrays()
        logger.info(f"T = {T:g} °C: k(t = {times[-1]:g} s) / k(0) = {k_t[-1] / k_t[0]:.4f}")

    if args.no_plot:
        return 0

    if args.output_dir:
        # Write files without requiring a display
        import matplotlib
        matplotlib.use("Agg")

    import matplotlib.pyplot as plt
    from springconstant.plotting import plot_temperature_sweep, plot_time_sweeps, save_figure

    fig_temperature = plot_temperature_sweep(temperature_sweep)
    fig_time = plot_time_sweeps(time_sweeps)

    if args.output_dir:
        try:
            save_figure(fig_temperature, os.path.join(args.output_dir, config.TEMPERATURE_FIGURE_NAME))
            save_figure(fig_time, os.path.join(args.output_dir, config.TIME_FIGURE_NAME))
        except OSError as e:
            logger.error(f"Could not save figures to {args.output_dir}: {e}")
            return 2
        finally:
            plt.close(fig_temperature)
            plt.close(fig_time)
    else:
        plt.show()
    return 0


if __name__ == "__main__":
    sys.exit(main())
