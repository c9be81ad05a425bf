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

# =========================================
# data_for_visualization.py
# Description: Data class for visualization
# =========================================

from exceptions.exceptions import LengthMismatchError


class DataForVisualization:
    """Data class for visualization."""

    def __init__(self, counts: list, expected: float = None, labels: list[str] = None) -> None:
        """
            Initialize the data for visualization.

            Parameters:
                counts (list): The number of samples per bucket.
                expected (float): The expected count of every bucket. Defaults to the mean count.
                labels (list[str]): The bucket labels. Defaults to the bucket indices.
        """
        self.counts = [int(c) for c in counts]
        self.expected = expected if expected is not None else (sum(self.counts) / len(self.counts) if self.counts else 0)
        self.labels = labels if labels is not None else [str(i) for i in range(len(self.counts))]
        if len(self.labels) != len(self.counts):
            raise LengthMismatchError(len(self.counts), len(self.labels))

    @classmethod
    def from_result(cls, result) -> "DataForVisualization":
        """Build the data from a uniformity analysis result."""
        counts = list(result.counts)
        return cls(counts, expected=sum(counts) / result.limit)
