"""
Command-line interface for envi_reader.
"""

import argparse
import logging
import sys

from .reader import ENVIReader
from .utilities import MAX_CHARS
from .visualization import save_gray, save_rgb


def main(argv=None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="ENVI raster reader (.hdr + .dat/.raw)"
    )

    parser.add_argument(
        "file_path",
        help="Path to the .hdr file of the dataset"
    )

    parser.add_argument(
        "--info",
        action="store_true",
        help="Show header information"
    )

    parser.add_argument(
        "--band",
        type=int,
        default=0,
        help="Band used by --stats, --print, --export-csv, --save-gray and --show (default: 0)"
    )

    parser.add_argument(
        "--stats",
        action="store_true",
        help="Show band statistics"
    )

    parser.add_argument(
        "--print",
        dest="print_band",
        action="store_true",
        help="Print the band values (truncated)"
    )

    parser.add_argument(
        "--export-csv",
        type=str,
        help="Export band values to CSV file"
    )

    parser.add_argument(
        "--save-gray",
        type=str,
        metavar="OUTPUT",
        help="Save the band as grayscale .png/.jpg"
    )

    parser.add_argument(
        "--save-rgb",
        nargs=4,
        metavar=("R", "G", "B", "OUTPUT"),
        help="Save three bands as RGB .png/.jpg"
    )

    parser.add_argument(
        "--show",
        action="store_true",
        help="Plot the band with matplotlib"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Report header and data problems on stderr"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    try:
        reader = ENVIReader(quiet=not args.verbose)
        dataset = reader.read_file(args.file_path)

        if args.info:
            print_info(dataset)

        if args.stats:
            print_stats(dataset, args.band)

        if args.print_band:
            print(dataset.band_to_string(args.band, MAX_CHARS))

        if args.export_csv:
            export_to_csv(dataset, args.band, args.export_csv)
            print(f"Data exported to: {args.export_csv}")

        if args.save_gray:
            save_gray(dataset, args.band, args.save_gray)
            print(f"Image saved to: {args.save_gray}")

        if args.save_rgb:
            r, g, b = (int(x) for x in args.save_rgb[:3])
            save_rgb(dataset, r, g, b, args.save_rgb[3])
            print(f"Image saved to: {args.save_rgb[3]}")

        if args.show:
            show_band(dataset, args.band)

        if not any([args.info, args.stats, args.print_band, args.export_csv,
                    args.save_gray, args.save_rgb, args.show]):
            print(f"File loaded successfully: {args.file_path}")
            print(f"Dimensions: {dataset.samples} samples x {dataset.lines} lines x {dataset.bands} bands")
            print(f"Data type: {dataset.data_type.description}")

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def print_info(dataset):
    """Print header information."""
    print("\n=== HEADER ===")
    print(f"Samples: {dataset.samples}")
    print(f"Lines: {dataset.lines}")
    print(f"Bands: {dataset.bands}")
    print(f"Data type: {dataset.data_type.name} ({dataset.data_type.description})")
    print(f"Byte order: {dataset.byte_order.name}")
    print(f"Interleave: {dataset.interleave.description}")
    print("\n=== RAW FIELDS ===")
    print(str(dataset), end="")


def print_stats(dataset, band):
    """Print band statistics."""
    stats = dataset.get_statistics(band)

    print(f"\n=== BAND {band} STATISTICS ===")
    print(f"Minimum: {stats.minimum:.4f}")
    print(f"Maximum: {stats.maximum:.4f}")
    print(f"Mean: {stats.mean:.4f}")
    print(f"Std dev: {stats.std:.4f}")


def export_to_csv(dataset, band, output_path):
    """Export band values to CSV format."""
    import csv

    data = dataset.get_band(band)

    with open(output_path, 'w', newline='') as csvfile:
        writer = csv.writer(csvfile)

        # Header
        writer.writerow(['Sample', 'Line', 'Value'])

        # Data
        for y in range(data.shape[0]):
            for x in range(data.shape[1]):
                writer.writerow([x, y, data[y, x]])


def show_band(dataset, band):
    """Display one band in a matplotlib window."""
    import matplotlib.pyplot as plt
    from .visualization import plot_band

    plot_band(dataset, band)
    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
