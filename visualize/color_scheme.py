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

# ===========================================
# color_scheme.py
# Description: Color scheme for visualization
# ===========================================


class ColorScheme:
    """Color scheme for distribution visualization."""

    def __init__(self, background_color='white', bar_color='#B6D7A8', deviant_bar_color='#EA9999',
                 expected_line_color='black', axis_color='#808080') -> None:
        """
            Initialize the color scheme.

            Parameters:
                background_color (str): The background color.
                bar_color (str): The color of buckets within tolerance.
                deviant_bar_color (str): The color of buckets deviating beyond tolerance.
                expected_line_color (str): The color of the expected count line.
                axis_color (str): The color of the axis.
        """
        self.background_color = background_color
        self.bar_color = bar_color
        self.deviant_bar_color = deviant_bar_color
        self.expected_line_color = expected_line_color
        self.axis_color = axis_color

    def set_background_color(self, color) -> None:
        self.background_color = color

    def set_bar_color(self, color) -> None:
        self.bar_color = color

    def set_deviant_bar_color(self, color) -> None:
        self.deviant_bar_color = color

    def get_legend_items(self):
        return [
            ("Within tolerance", self.bar_color),
            ("Deviant", self.deviant_bar_color),
            ("Expected", self.expected_line_color)
        ]
