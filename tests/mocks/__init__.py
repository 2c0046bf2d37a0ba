"""
Mock implementations for testing vstoolsets components.

This package provides mock implementations of the discovery probes
(filesystem, process runner, environment) to enable isolated, deterministic
testing.
"""

from .filesystem import MockFilesystem
from .process import FakeProcessRunner, FakeEnvironment

__all__ = [
    "MockFilesystem",
    "FakeProcessRunner",
    "FakeEnvironment",
]
