"""Load ENVI header/data file pairs; returns a typed dataset, or None when anything fails."""

import logging
from pathlib import Path
from typing import List, Optional, Sequence, Union

from .datasets import RasterDataset, create_dataset
from .models import Header
from .parsers import parse_header
from .utilities import replace_extension

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".dat", ".DAT", ".raw", "")
HEADER_EXTENSION = ".hdr"
HEADER_ENCODINGS = ("utf-8", "latin-1")


def read_header(file_path: Union[str, Path], quiet: bool = True) -> Optional[Header]:
    """Read and parse an .hdr file; None if it cannot be read."""
    file_path = Path(file_path)
    try:
        raw = file_path.read_bytes()
        for encoding in HEADER_ENCODINGS:
            try:
                text = raw.decode(encoding)
                break
            except UnicodeDecodeError:
                continue
        else:
            raise ValueError(f"Could not decode header: {file_path}")
        return parse_header(text, quiet=quiet)
    except Exception:
        if not quiet:
            logger.error("Failed to read ENVI header: %s", file_path, exc_info=True)
        return None


def read_dataset(header: Header, file_path: Union[str, Path], quiet: bool = True) -> Optional[RasterDataset]:
    """Read the data file and decode it with the dataset class for the header's data type; None on failure."""
    file_path = Path(file_path)
    try:
        raw = file_path.read_bytes()
        return create_dataset(header, raw, quiet=quiet)
    except Exception:
        if not quiet:
            logger.error("Failed to load the ENVI data from: %s", file_path, exc_info=True)
        return None


def find_data_file(file_path: Union[str, Path], extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> Optional[Path]:
    """First existing sibling of the header with one of the candidate extensions; never the header itself."""
    file_path = Path(file_path)
    for ext in extensions:
        candidate = replace_extension(file_path, ext)
        if candidate != file_path and candidate.is_file():
            return candidate
    return None


def envi_load(
    file_path: Union[str, Path],
    quiet: bool = True,
    extensions: Optional[Sequence[str]] = None,
) -> Optional[RasterDataset]:
    """
    Load an ENVI dataset from its .hdr file.

    The data file is looked up next to the header by replacing the header's
    extension with each of the candidate extensions in turn.

    Args:
        file_path: Path to the .hdr file
        quiet: Suppress diagnostics (logged otherwise)
        extensions: Candidate data file extensions, DEFAULT_EXTENSIONS if None

    Returns:
        The decoded dataset (e.g. UInt8Dataset), or None if header or data
        could not be loaded.

    Usage example:
        import envi_reader

        dataset = envi_reader.envi_load("scene.hdr")
        if dataset is not None:
            band = dataset.get_band(0)
            print(f"Dimensions: {band.shape}")
    """
    if extensions is None:
        extensions = DEFAULT_EXTENSIONS
    header = read_header(file_path, quiet=quiet)
    if header is None:
        return None
    data_path = find_data_file(file_path, extensions)
    if data_path is None:
        if not quiet:
            logger.error("Failed to locate corresponding data file, looked for: %s", list(extensions))
        return None
    return read_dataset(header, data_path, quiet=quiet)


class ENVIReader:
    """Read ENVI .hdr/.dat file pairs."""

    def __init__(self, quiet: bool = True, extensions: Sequence[str] = DEFAULT_EXTENSIONS):
        self.quiet = quiet
        self.extensions = tuple(extensions)

    def read_file(self, file_path: Union[str, Path]) -> RasterDataset:
        """Load the dataset described by file_path.

        Raises:
            FileNotFoundError: If the header doesn't exist
            ValueError: If the file is not an .hdr file or cannot be loaded
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        if file_path.suffix.lower() != HEADER_EXTENSION:
            raise ValueError(f"Unsupported file format: {file_path.suffix}. Supported formats: .hdr")
        dataset = envi_load(file_path, quiet=self.quiet, extensions=self.extensions)
        if dataset is None:
            raise ValueError(f"Failed to load ENVI dataset: {file_path}")
        return dataset

    def read_directory(self, directory_path: Union[str, Path], recursive: bool = False) -> List[RasterDataset]:
        """Return the datasets of all loadable .hdr files in directory."""
        directory_path = Path(directory_path)
        if not directory_path.is_dir():
            raise NotADirectoryError(f"Not a directory: {directory_path}")
        out = []
        pattern = "**/*" if recursive else "*"
        for file_path in sorted(directory_path.glob(pattern)):
            if file_path.suffix.lower() != HEADER_EXTENSION:
                continue
            dataset = envi_load(file_path, quiet=self.quiet, extensions=self.extensions)
            if dataset is not None:
                out.append(dataset)
        return out

    def get_supported_formats(self) -> List[str]:
        return [HEADER_EXTENSION]

    def validate_file(self, file_path: Union[str, Path]) -> bool:
        """Return True if the file pair can be loaded."""
        try:
            self.read_file(file_path)
            return True
        except (OSError, ValueError):
            return False
