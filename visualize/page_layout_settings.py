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

# ===================================================
# page_layout_settings.py
# Description: Page layout settings for visualization
# ===================================================


class PageLayoutSettings:
    """Page layout settings for visualization."""

    def __init__(self, bar_width: int = 12, bar_spacing: int = 4, max_bar_height: int = 200,
                 label_spacing: int = 6, legend_spacing: int = 16,
                 margin_t: int = 10, margin_b: int = 10, margin_l: int = 10, margin_r: int = 10) -> None:
        """
            Initialize the page layout settings.

            Parameters:
                bar_width (int): The width of one bucket bar.
                bar_spacing (int): The gap between two bars.
                max_bar_height (int): The height of the tallest bar.
                label_spacing (int): The gap between the axis and the bucket labels.
                legend_spacing (int): The gap between the chart and the legend.
                margin_t (int): The top margin.
                margin_b (int): The bottom margin.
                margin_l (int): The left margin.
                margin_r (int): The right margin.
        """
        self.bar_width = bar_width
        self.bar_spacing = bar_spacing
        self.max_bar_height = max_bar_height
        self.label_spacing = label_spacing
        self.legend_spacing = legend_spacing
        self.margin_t = margin_t
        self.margin_b = margin_b
        self.margin_l = margin_l
        self.margin_r = margin_r
