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

# ============================================
# font_settings.py
# Description: Font settings for visualization
# ============================================

from PIL import ImageFont


class FontSettings:
    """Font settings for visualization."""

    def __init__(self, font_path: str = None, font_size: int = 12) -> None:
        """
            Initialize the font settings.

            Parameters:
                font_path (str): The path to a TrueType font file. Pillow's built-in font is used when omitted.
                font_size (int): The font size.
        """
        self.font_path = font_path
        self.font_size = font_size
        if font_path is None:
            self.font = ImageFont.load_default()
        else:
            self.font = ImageFont.truetype(self.font_path, self.font_size)

    def text_size(self, text: str) -> tuple:
        """Return the (width, height) of the rendered text."""
        bbox = self.font.getbbox(text)
        return bbox[2] - bbox[0], bbox[3] - bbox[1]
