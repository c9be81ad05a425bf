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

# ============================================================================
# test_visualize.py
# Description: This file contains the test cases for the visualization module.
# ============================================================================

import pytest
from rng.sampler import Sampler
from visualize.color_scheme import ColorScheme
from visualize.page_layout_settings import PageLayoutSettings
from visualize.data_for_visualization import DataForVisualization
from visualize.visualizer import DistributionVisualizer
from evaluation.pipelines.uniformity import UniformityAnalysisPipeline, UniformityPipelineReturnType
from exceptions.exceptions import LengthMismatchError


def test_data_for_visualization():
    data = DataForVisualization([10, 30])
    assert data.expected == 20
    assert data.labels == ['0', '1']
    with pytest.raises(LengthMismatchError):
        DataForVisualization([1, 2, 3], labels=['a'])


def test_bar_colors():
    scheme = ColorScheme()
    visualizer = DistributionVisualizer(color_scheme=scheme, page_layout_settings=PageLayoutSettings())
    data = DataForVisualization([10, 100], expected=55)

    # The first bar spans x in [10, 22] and y in [190, 210]
    plain = visualizer.visualize(data, display_legend=False)
    assert plain.getpixel((16, 200)) == (182, 215, 168)

    flagged = visualizer.visualize(data, tolerance=0.1)
    assert flagged.getpixel((16, 200)) == (234, 153, 153)
    assert flagged.size[1] > plain.size[1]


def test_visualize_pipeline_result(tmp_path):
    pipeline = UniformityAnalysisPipeline(limits=[8], draws=800, show_progress=False,
                                          return_type=UniformityPipelineReturnType.FULL)
    result = pipeline.evaluate(Sampler.from_seed(1))[0]
    data = DataForVisualization.from_result(result)
    assert data.expected == 100
    img = DistributionVisualizer().visualize(data, tolerance=0.5)
    img.save(str(tmp_path / 'distribution.png'))
    assert (tmp_path / 'distribution.png').exists()
