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

# =========================================================
# visualizer.py
# Description: Bar chart of bucket counts against the
#              count a uniform distribution would expect
# =========================================================

from PIL import Image, ImageDraw
from .font_settings import FontSettings
from .page_layout_settings import PageLayoutSettings
from .data_for_visualization import DataForVisualization
from .color_scheme import ColorScheme


class DistributionVisualizer:
    """Visualizer drawing one bar per bucket and a line at the expected count."""

    def __init__(self, color_scheme: ColorScheme = None, font_settings: FontSettings = None,
                 page_layout_settings: PageLayoutSettings = None) -> None:
        """
            Initialize the visualizer.

            Parameters:
                color_scheme (ColorScheme): The color scheme.
                font_settings (FontSettings): The font settings.
                page_layout_settings (PageLayoutSettings): The page layout settings.
        """
        self.color_scheme = color_scheme if color_scheme is not None else ColorScheme()
        self.font_settings = font_settings if font_settings is not None else FontSettings()
        self.page_layout_settings = page_layout_settings if page_layout_settings is not None else PageLayoutSettings()

    def _scale(self, data: DataForVisualization) -> float:
        """Pixels per sample, so that the tallest of bars and expected line fits max_bar_height."""
        top = max(max(data.counts, default=0), data.expected)
        if top == 0:
            return 0.0
        return self.page_layout_settings.max_bar_height / top

    def _is_deviant(self, count: int, expected: float, tolerance) -> bool:
        if tolerance is None or expected == 0:
            return False
        return abs(count - expected) / expected > tolerance

    def _display_legend(self, draw: ImageDraw, x: int, y: int) -> None:
        """Display the legend on the image."""
        size = self.font_settings.font_size
        for label, color in self.color_scheme.get_legend_items():
            draw.rectangle([x, y, x + size, y + size], fill=color)
            draw.text((x + size + 4, y), label, fill="black", font=self.font_settings.font)
            x += size + 4 + self.font_settings.text_size(label)[0] + self.page_layout_settings.legend_spacing

    def _legend_width(self) -> int:
        size = self.font_settings.font_size
        return sum(size + 4 + self.font_settings.text_size(label)[0] + self.page_layout_settings.legend_spacing
                   for label, _ in self.color_scheme.get_legend_items())

    def visualize(self, data: DataForVisualization, tolerance: float = None, display_legend: bool = True) -> Image.Image:
        """
            Render the bucket counts as an image.

            Parameters:
                data (DataForVisualization): The bucket counts and the expected count.
                tolerance (float): Buckets whose relative deviation exceeds it use the deviant color.
                display_legend (bool): Whether to draw the legend below the chart.
        """
        layout = self.page_layout_settings
        label_height = self.font_settings.font_size
        step = layout.bar_width + layout.bar_spacing

        chart_width = max(len(data.counts) * step - layout.bar_spacing, 1)
        img_width = layout.margin_l + chart_width + layout.margin_r
        img_height = layout.margin_t + layout.max_bar_height + layout.label_spacing + label_height + layout.margin_b
        if display_legend:
            img_width = max(img_width, layout.margin_l + self._legend_width() + layout.margin_r)
            img_height += layout.legend_spacing + label_height

        image = Image.new('RGB', (img_width, img_height), color=self.color_scheme.background_color)
        draw = ImageDraw.Draw(image)

        scale = self._scale(data)
        baseline = layout.margin_t + layout.max_bar_height

        # Bars and bucket labels
        for i, (count, label) in enumerate(zip(data.counts, data.labels)):
            x = layout.margin_l + i * step
            color = self.color_scheme.deviant_bar_color if self._is_deviant(count, data.expected, tolerance) else self.color_scheme.bar_color
            draw.rectangle([x, baseline - int(round(count * scale)), x + layout.bar_width, baseline], fill=color)
            draw.text((x, baseline + layout.label_spacing), label, fill="black", font=self.font_settings.font)

        draw.line([(layout.margin_l, baseline), (layout.margin_l + chart_width, baseline)], fill=self.color_scheme.axis_color)
        expected_y = baseline - int(round(data.expected * scale))
        draw.line([(layout.margin_l, expected_y), (layout.margin_l + chart_width, expected_y)],
                  fill=self.color_scheme.expected_line_color, width=1)

        if display_legend:
            self._display_legend(draw, layout.margin_l, baseline + layout.label_spacing + label_height + layout.legend_spacing)

        return image
