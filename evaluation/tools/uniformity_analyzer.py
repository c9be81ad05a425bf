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

# ==========================================================
# uniformity_analyzer.py
# Description: Analyze whether integer samples drawn from
#              [0, limit) are uniformly distributed
# ==========================================================

import numpy as np
from typing import Dict, Sequence
from scipy.stats import chisquare
from exceptions.exceptions import ConfigurationError, InvalidArgumentError


def bucket_counts(samples: Sequence[int], limit: int) -> np.ndarray:
    """Count the samples falling in each of the `limit` buckets."""
    samples = np.asarray(samples, dtype=np.int64)
    if samples.size and (samples.min() < 0 or samples.max() >= limit):
        raise InvalidArgumentError('bucket_counts', limit, "received samples outside [0, limit)")
    return np.bincount(samples, minlength=limit)


class UniformityAnalyzer:
    """Base class for uniformity analyzers."""

    name = 'base'

    def __init__(self) -> None:
        pass

    def analyze(self, samples: Sequence[int], limit: int) -> Dict[str, float]:
        """Return a dict with the analyzer 'score' and an 'is_uniform' flag."""
        pass


class BucketDeviationAnalyzer(UniformityAnalyzer):
    """
        Analyzer based on the largest relative deviation of a bucket from its expected count.

        With `draws` samples over `limit` buckets each bucket expects `draws / limit` hits.
        The score is max(|count - expected|) / expected and the samples pass when the
        score does not exceed the tolerance.
    """

    name = 'bucket_deviation'

    def __init__(self, tolerance: float = 0.05) -> None:
        """
            Initialize the bucket deviation analyzer.

            Parameters:
                tolerance (float): The largest accepted relative deviation.
        """
        if tolerance <= 0:
            raise ConfigurationError(f"Tolerance must be positive, got {tolerance}.")
        self.tolerance = tolerance

    def analyze(self, samples: Sequence[int], limit: int) -> Dict[str, float]:
        counts = bucket_counts(samples, limit)
        expected = counts.sum() / limit
        if expected == 0:
            raise InvalidArgumentError('analyze', samples, "received no samples")
        score = float(np.max(np.abs(counts - expected)) / expected)
        return {'score': score, 'is_uniform': score <= self.tolerance}


class ChiSquareUniformityAnalyzer(UniformityAnalyzer):
    """Analyzer based on Pearson's chi-square goodness of fit test against the uniform distribution."""

    name = 'chi_square'

    def __init__(self, significance: float = 0.01) -> None:
        """
            Initialize the chi-square analyzer.

            Parameters:
                significance (float): Samples whose p-value falls below it are flagged as non-uniform.
        """
        if not 0 < significance < 1:
            raise ConfigurationError(f"Significance must lie in (0, 1), got {significance}.")
        self.significance = significance

    def analyze(self, samples: Sequence[int], limit: int) -> Dict[str, float]:
        if limit < 2:
            raise InvalidArgumentError('analyze', limit, "needs at least two buckets")
        counts = bucket_counts(samples, limit)
        if counts.sum() == 0:
            raise InvalidArgumentError('analyze', samples, "received no samples")
        p_value = float(chisquare(counts).pvalue)
        return {'score': p_value, 'is_uniform': p_value >= self.significance}
