#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the gdoc2md library.

This module defines specialized exception classes for the error conditions
that can occur while converting a Google Docs document into Markdown.

Exception Hierarchy
-------------------
- Gdoc2MdError (base exception)

  - ValidationError (parameter/option/node validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - FileError (file access and I/O)
    - OutputWriteError (file write failures)

  - ParsingError (input document parsing failures)
    - MalformedDocumentError (broken references, invalid document structure)

  - RenderingError (Markdown generation failures)

  - DependencyError (optional package not installed)

"""

from typing import Any


class Gdoc2MdError(Exception):
    """Base exception class for all gdoc2md-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Gdoc2MdError):
    """Exception raised for invalid input parameters, options or node data.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(Gdoc2MdError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class OutputWriteError(FileError):
    """Exception raised when writing an output file fails."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(Gdoc2MdError):
    """Exception raised when document parsing fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class MalformedDocumentError(ParsingError):
    """Exception raised when the input document violates its own structure.

    Raised for dangling inline-object references, bullets that reference
    objects without image properties, and inputs that are not a document
    tree at all.

    Parameters
    ----------
    message : str
        Description of what is malformed
    object_id : str, optional
        Identifier of the offending inline object, if any

    """

    def __init__(
        self,
        message: str,
        object_id: str | None = None,
        parsing_stage: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the malformed document error."""
        super().__init__(message, parsing_stage=parsing_stage, original_error=original_error)
        self.object_id = object_id


class RenderingError(Gdoc2MdError):
    """Exception raised when Markdown rendering fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class DependencyError(Gdoc2MdError):
    """Exception raised when an optional dependency is not installed.

    Parameters
    ----------
    feature_name : str
        Name of the feature that needs the dependency
    missing_packages : list[str]
        Distribution names that need to be installed
    install_command : str, optional
        Suggested pip install command to resolve the issue
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        feature_name: str,
        missing_packages: list[str],
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        if message is None:
            pkg_list = ", ".join(f"'{name}'" for name in missing_packages)
            message = f"{feature_name} requires the following packages: {pkg_list}"
            if install_command:
                message += f". Install with: {install_command}"
        super().__init__(message, original_error=original_import_error)
        self.feature_name = feature_name
        self.missing_packages = missing_packages
        self.install_command = install_command
