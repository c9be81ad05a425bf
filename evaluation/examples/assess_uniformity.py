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
# assess_uniformity.py
# Description: Assess the uniformity of bounded integers
#              drawn from a seeded engine
# ==========================================================

from rng.auto_engine import AutoEngine
from rng.sampler import Sampler
from utils.seed_config import SeedConfig
from evaluation.tools.uniformity_analyzer import BucketDeviationAnalyzer, ChiSquareUniformityAnalyzer
from evaluation.pipelines.uniformity import UniformityAnalysisPipeline, UniformityPipelineReturnType


def assess_uniformity(algorithm_name, seed, limits, draws, tolerance, significance):
    engine = AutoEngine.load(algorithm_name, seed_config=SeedConfig(seed=seed))
    sampler = Sampler(engine)

    pipeline = UniformityAnalysisPipeline(limits=limits, draws=draws,
                                          analyzers=[BucketDeviationAnalyzer(tolerance), ChiSquareUniformityAnalyzer(significance)],
                                          show_progress=True, return_type=UniformityPipelineReturnType.FULL)

    for result in pipeline.evaluate(sampler):
        print(result.limit, result.analyze_results, 'uniform' if result.is_uniform else 'BIASED')


if __name__ == '__main__':
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument('--algorithm', type=str, default='MT19937')
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--limits', nargs='+', type=int, default=[2, 3, 7, 100])
    parser.add_argument('--draws', type=int, default=100000)
    parser.add_argument('--tolerance', type=float, default=0.05)
    parser.add_argument('--significance', type=float, default=0.01)
    args = parser.parse_args()

    assess_uniformity(args.algorithm, args.seed, args.limits, args.draws, args.tolerance, args.significance)
