# Copyright 2024 THU-BPM MarkLLM.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

# ==============================================
# exceptions.py
# Description: Custom exceptions for the project
# ==============================================

class InvalidArgumentError(TypeError):
    """Exception raised when a sampling operation receives a value it cannot act on."""
    def __init__(self, operation: str, value, message: str = ""):
        self.operation = operation
        self.value = value
        self.message = message or "received an invalid argument"
        super().__init__(f"{operation}() {self.message}: {value!r}")


class InvalidStateSnapshotError(InvalidArgumentError):
    """Exception raised when an engine state snapshot has the wrong shape."""
    def __init__(self, snapshot, message: str = "received a malformed state snapshot"):
        super().__init__("import_state", snapshot, message)

    def __str__(self):
        # Snapshots hold 624 words, keep the message readable
        return f"{self.operation}() {self.message}"


class AlgorithmNameMismatchError(ValueError):
    """Exception raised when the algorithm name in the config does not match the expected engine or harness class."""
    def __init__(self, expected, actual):
        message = f"Config algorithm name '{actual}' does not match expected algorithm name '{expected}'."
        super().__init__(message)


class ConfigurationError(Exception):
    """Exception raised for errors in configuration files and analyzer settings."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InvalidReturnTypeError(Exception):
    """Exception raised for an unsupported pipeline return type."""
    def __init__(self, return_type, message="Invalid return type configuration"):
        self.return_type = return_type
        self.message = message
        super().__init__(f"{message}: {return_type}")


class LengthMismatchError(Exception):
    """Exception raised when the expected and actual lengths do not match."""
    def __init__(self, expected, actual):
        message = f"Expected length: {expected}, but got {actual}."
        super().__init__(message)
