"""Errors raised by the swagger-doc pipeline.

Every failure here is a configuration or environment problem, so the CLI
reports the message and exits non-zero. Nothing is retried.
"""


class SwaggerDocError(Exception):
    """Base class for all errors reported by swagger-doc."""


class LoadError(SwaggerDocError):
    """The input specification could not be read or is not Swagger/OpenAPI."""


class EncodingError(SwaggerDocError):
    """The document holds a value the target encoding cannot represent."""


class OutputError(SwaggerDocError):
    """Creating the output directory or writing a file failed."""
