#!/usr/bin/env python3
"""
Example script for envi_reader

This script demonstrates basic usage of the envi_reader package.

Usage:
    python example.py

Make sure to replace "scene.hdr" with your actual ENVI header path.
"""

from envi_reader import envi_load, save_gray
import matplotlib.pyplot as plt

def main():
    """Basic example showing band decoding and visualization."""

    print("ENVI Reader - Basic Example")
    print("=" * 50)

    # Replace with your actual header path
    hdr_file = "scene.hdr"

    print(f"Loading: {hdr_file}")
    dataset = envi_load(hdr_file, quiet=False)
    if dataset is None:
        print(f"Error: could not load '{hdr_file}' (see messages above).")
        return
    print("File loaded successfully!")

    # Basic information
    print(f"\nBASIC INFO:")
    print(f"  Size: {dataset.samples} x {dataset.lines}, {dataset.bands} bands")
    print(f"  Data type: {dataset.data_type.description}")
    print(f"  Interleave: {dataset.interleave.description}")
    print(f"  Byte order: {dataset.byte_order.name}")

    # First band
    band = dataset.get_band(0)
    print(f"\nBAND 0:")
    print(f"  Range: {band.min()} - {band.max()}")
    print(f"  Average: {band.mean():.2f}")
    print(f"  Std Dev: {band.std():.2f}")

    save_gray(dataset, 0, "band0.png")
    print("  Saved band0.png")

    plt.figure(figsize=(12, 5))

    # Band image
    plt.subplot(1, 2, 1)
    plt.imshow(band, cmap='gray')
    plt.colorbar(label='Value')
    plt.title('Band 0')
    plt.xlabel('Sample')
    plt.ylabel('Line')

    # Value histogram
    plt.subplot(1, 2, 2)
    plt.hist(band.flatten(), bins=50, alpha=0.7, color='gray', edgecolor='black')
    plt.title('Value Distribution')
    plt.xlabel('Value')
    plt.ylabel('Pixel Count')
    plt.axvline(band.mean(), color='blue', linestyle='--',
               label=f'Mean: {band.mean():.1f}')
    plt.legend()
    plt.grid(True, alpha=0.3)

    plt.tight_layout()
    plt.show()

if __name__ == "__main__":
    main()
