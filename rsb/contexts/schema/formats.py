"""
Format Dispatcher

Loads resume documents from JSON/JSON5, YAML, RON and Jsonnet sources.

The input format is chosen from the file extension (case-sensitive). Every
format is first turned into plain Python containers and then decoded by the
same model code, so all formats converge on an identical Resume. Jsonnet is a
preprocessing stage only: the evaluator's JSON output goes through the JSON5
decoder.
"""

from enum import Enum
from pathlib import Path
from typing import Any, Union

import json5
import yaml

from rsb.contexts.schema.exceptions import (
    DecodeError,
    EvaluationError,
    ResumeIOError,
    UnknownFormatError,
)
from rsb.contexts.schema.logger import (
    _log_debug,
    _log_error,
    log_load_result,
    log_load_start,
)
from rsb.contexts.schema.resume_data_structure import Resume
from rsb.utils.ron_parsing_tools import RonSyntaxError, parse_ron

# Evaluator bounds for jsonnet input (not configurable)
JSONNET_MAX_STACK = 200
JSONNET_MAX_TRACE = 20


class DataType(Enum):
    """Formats that can be decoded from an in-memory buffer."""

    JSON5 = "json5"
    YAML = "yaml"
    RON = "ron"


class FileType(Enum):
    """Formats that can be loaded from a file path."""

    JSON5 = "json5"
    YAML = "yaml"
    RON = "ron"
    JSONNET = "jsonnet"


EXTENSION_FILE_TYPES = {
    "json": FileType.JSON5,
    "json5": FileType.JSON5,
    "yaml": FileType.YAML,
    "yml": FileType.YAML,
    "ron": FileType.RON,
    "jsonnet": FileType.JSONNET,
}


class ResumeYAMLLoader(yaml.SafeLoader):
    """
    SafeLoader that keeps plain scalars as strings.

    Every scalar in the resume model is text, so `endDate: 2020` must stay
    "2020" rather than become an int (or a datetime.date for 2020-01-01).
    Only null and merge-key resolution are kept.
    """


ResumeYAMLLoader.yaml_implicit_resolvers = {
    first_char: [
        (tag, regexp)
        for tag, regexp in resolvers
        if tag in ("tag:yaml.org,2002:null", "tag:yaml.org,2002:merge")
    ]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def file_type_for(path: Path) -> FileType:
    """
    Determine the input format from a file extension.

    Args:
        path: Input path

    Returns:
        FileType for the extension

    Raises:
        UnknownFormatError: If the path has no extension or it is not recognized
    """
    extension = Path(path).suffix.removeprefix(".")
    if extension not in EXTENSION_FILE_TYPES:
        raise UnknownFormatError(extension, Path(path))
    return EXTENSION_FILE_TYPES[extension]


def parse_text(text: str, data_type: DataType) -> Any:
    """
    Parse text into plain Python containers without building the model.

    Args:
        text: Document source
        data_type: Syntax of text

    Returns:
        Parsed data (normally a dict)

    Raises:
        DecodeError: If text is not valid in the given syntax or is nested
            deeper than the decoders can follow
    """
    try:
        if data_type is DataType.JSON5:
            return json5.loads(text)
        if data_type is DataType.YAML:
            return yaml.load(text, Loader=ResumeYAMLLoader)
        if data_type is DataType.RON:
            return parse_ron(text)
    except yaml.YAMLError as e:
        raise DecodeError(f"invalid YAML: {e}") from e
    except RonSyntaxError as e:
        raise DecodeError(f"invalid RON: {e}") from e
    except ValueError as e:
        raise DecodeError(f"invalid JSON5: {e}") from e
    except RecursionError as e:
        raise DecodeError(f"invalid {data_type.name}: input nested too deeply") from e

    raise ValueError(f"Unsupported data type: {data_type}")


def from_buffer(text: str, data_type: Union[DataType, str]) -> Resume:
    """
    Decode a resume from an in-memory document.

    Args:
        text: Document source
        data_type: DataType, or a format name / extension such as "yml"

    Returns:
        Decoded Resume

    Raises:
        UnknownFormatError: If data_type is not a buffer format (jsonnet needs a file)
        DecodeError: If the text or its structure is invalid
        DateError: If a date field is invalid
    """
    data_type = _as_data_type(data_type)
    data = parse_text(text, data_type)
    return Resume.from_dict(data)


def from_file(path: Union[Path, str]) -> Resume:
    """
    Load and decode a resume file, choosing the decoder from its extension.

    Args:
        path: Path to a .json, .json5, .yaml, .yml, .ron or .jsonnet file

    Returns:
        Decoded Resume

    Raises:
        UnknownFormatError: If the extension is not recognized (checked before reading)
        ResumeIOError: If the file cannot be read
        DecodeError: If the content or its structure is invalid
        DateError: If a date field is invalid
        EvaluationError: If jsonnet evaluation fails
    """
    path = Path(path)
    file_type = file_type_for(path)
    log_load_start(path, file_type.value)

    if file_type is FileType.JSONNET:
        text = evaluate_jsonnet(path)
        data_type = DataType.JSON5
    else:
        text = _read_text(path)
        data_type = DataType(file_type.value)

    resume = from_buffer(text, data_type)
    log_load_result(path, resume)
    return resume


def evaluate_jsonnet(path: Path) -> str:
    """
    Evaluate a jsonnet file to JSON text.

    Imports resolve relative to the file, which is why jsonnet cannot be
    evaluated from a buffer.

    Args:
        path: Jsonnet file

    Returns:
        JSON text produced by the evaluator

    Raises:
        ResumeIOError: If the file does not exist
        EvaluationError: If evaluation fails, exceeds its bounds, or jsonnet
            support is not installed
    """
    if not path.is_file():
        raise ResumeIOError("Resume file not found", path)

    try:
        import _jsonnet
    except ImportError as e:
        raise EvaluationError(
            "jsonnet support is not installed (pip install 'rsb[jsonnet]')", path
        ) from e

    try:
        output = _jsonnet.evaluate_file(
            str(path), max_stack=JSONNET_MAX_STACK, max_trace=JSONNET_MAX_TRACE
        )
    except RuntimeError as e:
        _log_error(f"jsonnet err: {e}")
        raise EvaluationError(str(e), path) from e

    _log_debug(f"jsonnet out:{output}")
    return output


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"input is not valid UTF-8: {e}") from e
    except OSError as e:
        raise ResumeIOError(f"Could not read resume file: {e.strerror or e}", path) from e


def _as_data_type(data_type: Union[DataType, str]) -> DataType:
    if isinstance(data_type, DataType):
        return data_type

    file_type = EXTENSION_FILE_TYPES.get(data_type)
    if file_type is None:
        raise UnknownFormatError(data_type)
    if file_type is FileType.JSONNET:
        raise UnknownFormatError(
            data_type, message="Jsonnet can not be loaded from a buffer; pass a file path instead"
        )
    return DataType(file_type.value)
