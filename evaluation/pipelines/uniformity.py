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

# ===============================================================
# uniformity.py
# Description: Pipeline drawing bounded integers from a sampler
#              and checking them with uniformity analyzers
# ===============================================================

from tqdm import tqdm
from enum import Enum, auto
from typing import Sequence
from rng.sampler import Sampler
from evaluation.tools.uniformity_analyzer import UniformityAnalyzer, BucketDeviationAnalyzer, bucket_counts
from exceptions.exceptions import InvalidReturnTypeError


class UniformityPipelineReturnType(Enum):
    """Return type of the uniformity analysis pipeline."""
    FULL = auto()
    SCORES = auto()
    IS_UNIFORM = auto()


class UniformityAnalysisResult:
    """Result of the uniformity analysis of one limit."""

    def __init__(self, limit: int, counts, analyze_results: dict) -> None:
        """
            Initialize the uniformity analysis result.

            Parameters:
                limit (int): The exclusive upper bound the samples were drawn from.
                counts: The number of samples per bucket.
                analyze_results (dict): Analyzer name mapped to its result dict.
        """
        self.limit = limit
        self.counts = counts
        self.analyze_results = analyze_results

    @property
    def is_uniform(self) -> bool:
        return all(result['is_uniform'] for result in self.analyze_results.values())


class UniformityAnalysisPipeline:
    """Pipeline for uniformity analysis of `Sampler.uniform_int`."""

    def __init__(self, limits: Sequence[int] = (2, 3, 7, 100), draws: int = 100000,
                 analyzers: Sequence[UniformityAnalyzer] = None, show_progress: bool = True,
                 return_type: UniformityPipelineReturnType = UniformityPipelineReturnType.SCORES) -> None:
        """
            Initialize the uniformity analysis pipeline.

            Parameters:
                limits (Sequence[int]): The exclusive upper bounds to sample from.
                draws (int): The number of samples per limit.
                analyzers (Sequence[UniformityAnalyzer]): The analyzers applied to every limit.
                show_progress (bool): Whether to show progress bar.
                return_type (UniformityPipelineReturnType): The return type of the pipeline.
        """
        if not isinstance(return_type, UniformityPipelineReturnType):
            raise InvalidReturnTypeError(return_type)
        self.limits = list(limits)
        self.draws = draws
        self.analyzers = list(analyzers) if analyzers is not None else [BucketDeviationAnalyzer()]
        self.show_progress = show_progress
        self.return_type = return_type

    def _get_progress_bar(self, iterable):
        """Return an iterable possibly wrapped with a progress bar."""
        if self.show_progress:
            return tqdm(iterable, desc="Sampling", leave=True)
        return iterable

    def _draw(self, sampler: Sampler, limit: int) -> list:
        return [sampler.uniform_int(limit) for _ in range(self.draws)]

    def evaluate(self, sampler: Sampler):
        """Conduct evaluation utilizing the pipeline."""
        evaluation_result = []
        for limit in self._get_progress_bar(self.limits):
            samples = self._draw(sampler, limit)
            analyze_results = {analyzer.name: analyzer.analyze(samples, limit) for analyzer in self.analyzers}
            evaluation_result.append(UniformityAnalysisResult(limit, bucket_counts(samples, limit), analyze_results))

        if self.return_type == UniformityPipelineReturnType.FULL:
            return evaluation_result
        elif self.return_type == UniformityPipelineReturnType.SCORES:
            return [{name: result['score'] for name, result in r.analyze_results.items()} for r in evaluation_result]
        elif self.return_type == UniformityPipelineReturnType.IS_UNIFORM:
            return [r.is_uniform for r in evaluation_result]
