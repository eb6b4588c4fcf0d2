"""
Annotation and container nodes: the figure itself, text boxes, labels,
calibration bars and images.
"""

import numpy as np

from .. import defaults
from .measure import END_CAP_SIZE_CONSTRAINTS, MARGIN_CONSTRAINTS, STROKE_WIDTH_CONSTRAINTS, Measure, Unit
from .node import (
    AlignedMixin,
    Capability,
    GraphicNode,
    LocatedMixin,
    NodeType,
    SizedMixin,
    is_finite_number,
)
from .styles import BkgFill, Marker, TextAlign


class _BackgroundMixin:
    def get_background_fill(self):
        return self._background_fill

    def set_background_fill(self, fill):
        if not isinstance(fill, BkgFill) or not fill.is_valid():
            return False
        return self._assign("background_fill", fill)


class FigureNode(LocatedMixin, SizedMixin, _BackgroundMixin, GraphicNode):
    """The root node of a figure document."""

    node_type = NodeType.FIGURE

    def __init__(self, title="", width=Measure(6.0, Unit.IN), height=Measure(4.0, Unit.IN)):
        super().__init__(title)
        self._init_location(Measure(0.5, Unit.IN), Measure(0.5, Unit.IN))
        self._init_size(width, height)
        self._hide_title = False
        self._title_horizontal_alignment = TextAlign.CENTERED
        self._title_vertical_alignment = TextAlign.TOP
        self._note = ""
        self._border_width = Measure(0.0, Unit.IN)
        self._background_fill = BkgFill.solid(None)

    def get_hide_title(self):
        return self._hide_title

    def set_hide_title(self, hide):
        return self._assign("hide_title", bool(hide))

    def get_title_horizontal_alignment(self):
        return self._title_horizontal_alignment

    def set_title_horizontal_alignment(self, align):
        return self._set_choice(
            "title_horizontal_alignment", align, TextAlign,
            (TextAlign.LEFT, TextAlign.CENTERED, TextAlign.RIGHT),
        )

    def get_title_vertical_alignment(self):
        return self._title_vertical_alignment

    def set_title_vertical_alignment(self, align):
        return self._set_choice(
            "title_vertical_alignment", align, TextAlign,
            (TextAlign.TOP, TextAlign.CENTERED, TextAlign.BOTTOM),
        )

    def get_note(self):
        """Free-form note attached to the figure; may span several lines."""
        return self._note

    def set_note(self, note):
        if not isinstance(note, str):
            return False
        return self._assign("note", note)

    def get_border_width(self):
        return self._border_width

    def set_border_width(self, width):
        return self._set_measure("border_width", width, STROKE_WIDTH_CONSTRAINTS)

    def rescale(self, pct, fonts_only=False):
        """
        Rescale the figure.

        Font sizes are scaled on the figure and wherever a descendant sets
        one explicitly. Unless ``fonts_only``, the figure's own size and all
        explicit stroke widths are scaled too.

        Parameters
        ----------
        pct : int
            Scale factor in percent, within [MIN_RESCALE..MAX_RESCALE].
        fonts_only : bool
            Only scale font sizes.

        Returns
        -------
        bool
            False if ``pct`` is out of range.
        """
        if not is_finite_number(pct) or int(pct) != float(pct):
            return False
        pct = int(pct)
        if pct < defaults.MIN_RESCALE or pct > defaults.MAX_RESCALE:
            return False
        if pct == 100:
            return True
        scale = pct / 100.0

        def clamp_font(size):
            return int(min(max(round(size * scale), defaults.MIN_FONT_SIZE), defaults.MAX_FONT_SIZE))

        self._styles["font_size"] = clamp_font(self.get_font_size())
        for node in self.walk():
            if node is not self and "font_size" in node._styles:
                node._styles["font_size"] = clamp_font(node._styles["font_size"])
            if not fonts_only and "stroke_width" in node._styles:
                sw = node._styles["stroke_width"]
                node._styles["stroke_width"] = STROKE_WIDTH_CONSTRAINTS.round(Measure(sw.value * scale, sw.units))
        if not fonts_only:
            for attr in ("width", "height"):
                m = getattr(self, "_" + attr)
                if not m.units.is_relative:
                    setattr(self, "_" + attr, Measure(round(m.value * scale, 3), m.units))
        self._changed("rescale")
        return True


class TextBoxNode(LocatedMixin, SizedMixin, AlignedMixin, _BackgroundMixin, GraphicNode):
    """Multi-line text block laid out within a bounding box."""

    node_type = NodeType.TEXTBOX
    has_id = True
    allow_linefeed_in_title = True

    MIN_LINE_HEIGHT = 0.8
    MAX_LINE_HEIGHT = 3.0

    def __init__(self, text=""):
        super().__init__(text)
        self._init_location(Measure(0.0, Unit.IN), Measure(0.0, Unit.IN))
        self._init_size(Measure(1.0, Unit.IN), Measure(1.0, Unit.IN))
        self._init_alignment(TextAlign.LEFT, TextAlign.TOP)
        self._margin = Measure(0.0, Unit.IN)
        self._clip = False
        self._background_fill = BkgFill.solid(None)
        self._line_height = 1.2

    def get_margin(self):
        return self._margin

    def set_margin(self, margin):
        return self._set_measure("margin", margin, MARGIN_CONSTRAINTS)

    def get_clip(self):
        return self._clip

    def set_clip(self, clip):
        return self._assign("clip", bool(clip))

    def get_line_height(self):
        """Text line height as a multiple of the font size."""
        return self._line_height

    def set_line_height(self, lh):
        if not is_finite_number(lh):
            return False
        return self._set_number("line_height", round(float(lh), 2), self.MIN_LINE_HEIGHT, self.MAX_LINE_HEIGHT)


class LabelNode(LocatedMixin, AlignedMixin, GraphicNode):
    """Single-line text label."""

    node_type = NodeType.LABEL
    has_id = True

    def __init__(self, text=""):
        super().__init__(text)
        self._init_location(Measure(0.0, Unit.IN), Measure(0.0, Unit.IN))
        self._init_alignment(TextAlign.LEFT, TextAlign.BOTTOM)


class CalibrationBarNode(GraphicNode):
    """Scale bar along a graph axis, labelled with its length."""

    node_type = NodeType.CALIB
    capabilities = Capability.FONT | Capability.FILL_COLOR | Capability.STROKE | Capability.STROKE_PATTERN

    def __init__(self, title=""):
        super().__init__(title)
        self._x = 0.0
        self._y = 0.0
        self._length = 10.0
        self._primary = True
        self._end_cap = Marker.LINETHRU
        self._end_cap_size = Measure(0.1, Unit.IN)
        self._auto_label = True

    def get_x(self):
        """Location in user (axis) units."""
        return self._x

    def set_x(self, x):
        return self._set_number("x", x)

    def get_y(self):
        return self._y

    def set_y(self, y):
        return self._set_number("y", y)

    def get_length(self):
        """Bar length in user units."""
        return self._length

    def set_length(self, length):
        if not is_finite_number(length) or float(length) <= 0:
            return False
        return self._assign("length", float(length))

    def get_primary(self):
        """Is the bar parallel to the primary (horizontal) axis?"""
        return self._primary

    def set_primary(self, primary):
        return self._assign("primary", bool(primary))

    def get_end_cap(self):
        return self._end_cap

    def set_end_cap(self, marker):
        return self._set_choice("end_cap", marker, Marker)

    def get_end_cap_size(self):
        return self._end_cap_size

    def set_end_cap_size(self, size):
        return self._set_measure("end_cap_size", size, END_CAP_SIZE_CONSTRAINTS)

    def get_auto_label(self):
        return self._auto_label

    def set_auto_label(self, on):
        return self._assign("auto_label", bool(on))


class ImageNode(LocatedMixin, SizedMixin, _BackgroundMixin, GraphicNode):
    """
    A raster image placed in the figure, optionally cropped.

    The crop rectangle ``(x, y, w, h)`` is in image pixels, with the origin
    at the top-left corner.
    """

    node_type = NodeType.IMAGE
    capabilities = Capability.STROKE
    has_id = True

    def __init__(self, title=""):
        super().__init__(title)
        self._init_location(Measure(0.0, Unit.IN), Measure(0.0, Unit.IN))
        self._init_size(Measure(2.0, Unit.IN), Measure(2.0, Unit.IN))
        self._margin = Measure(0.0, Unit.IN)
        self._background_fill = BkgFill.solid(None)
        self._image = None
        self._crop = None

    def get_margin(self):
        return self._margin

    def set_margin(self, margin):
        return self._set_measure("margin", margin, MARGIN_CONSTRAINTS)

    def has_image(self):
        return self._image is not None

    def get_image(self):
        return self._image

    def get_image_size(self):
        """(width, height) of the image in pixels, or (0, 0) when there is none."""
        if self._image is None:
            return 0, 0
        return self._image.shape[1], self._image.shape[0]

    def set_image(self, image):
        """Replace the image (or remove it with None); the crop is reset."""
        if image is not None:
            image = np.asarray(image)
            if image.ndim not in (2, 3) or image.size == 0:
                return False
            if image.ndim == 3 and image.shape[2] not in (3, 4):
                return False
        self._image = image
        self._crop = None
        self._changed("image")
        return True

    def get_crop(self):
        """Crop rectangle (x, y, w, h); the full image when not cropped."""
        if self._crop is not None:
            return self._crop
        w, h = self.get_image_size()
        return 0, 0, w, h

    def is_cropped(self):
        return self._crop is not None

    def set_crop(self, rect):
        if self._image is None:
            return False
        try:
            x, y, w, h = (int(v) for v in rect)
        except (TypeError, ValueError):
            return False
        img_w, img_h = self.get_image_size()
        if x < 0 or y < 0 or w < 1 or h < 1 or x + w > img_w or y + h > img_h:
            return False
        crop = None if (x, y, w, h) == (0, 0, img_w, img_h) else (x, y, w, h)
        return self._assign("crop", crop)

    def reset_crop(self):
        if self._image is None:
            return False
        return self._assign("crop", None)
