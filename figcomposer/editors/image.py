"""
Image property editor
"""

import logging

import ipywidgets as widgets

from .. import defaults
from ..core.controls import BkgFillPicker, MeasureEditor, float_field, int_field, text_field
from ..core.editor import NodeEditor
from ..fig.measure import LOCATION_CONSTRAINTS, MARGIN_CONSTRAINTS, SIZE_CONSTRAINTS
from ..fig.node import NodeType
from ..io import load_image
from .draw_style import DrawStyleEditor

logger = logging.getLogger(__name__)

_CROP_FIELDS = ('x', 'y', 'w', 'h')


class ImageEditor(NodeEditor):
    """
    Bounding box, margin, rotation and background of an image node, plus
    loading the image from a file and cropping it.
    """

    node_type = NodeType.IMAGE
    icon = 'image'
    title = 'Image'

    def __init__(self, alert=None):
        super().__init__(alert)
        self.title_field = self.register_text_field(text_field('Title:'))
        self.node_id = text_field('ID:', width=defaults.SHORT_FIELD_WIDTH)
        self.x = MeasureEditor('X:', LOCATION_CONSTRAINTS)
        self.y = MeasureEditor('Y:', LOCATION_CONSTRAINTS)
        self.width = MeasureEditor('Width:', SIZE_CONSTRAINTS)
        self.height = MeasureEditor('Height:', SIZE_CONSTRAINTS)
        self.margin = MeasureEditor('Margin:', MARGIN_CONSTRAINTS)
        self.rotate = float_field('Rotate °:')
        self.background = BkgFillPicker('Background:')

        self.path = text_field('File:', placeholder='path/to/image.png')
        self.load_button = widgets.Button(description='Load', icon='folder-open',
                                          layout=widgets.Layout(width='90px'))
        self.load_button.on_click(lambda btn: self.load_image_file(self.path.value))
        self.image_info = widgets.HTML()
        self.crop = {k: int_field(f'Crop {k}:') for k in _CROP_FIELDS}
        self.reset_crop_button = widgets.Button(description='Reset crop', icon='undo',
                                                layout=widgets.Layout(width='110px'))
        self.reset_crop_button.on_click(lambda btn: self.reset_crop())

        self.draw_style = self.add_panel(DrawStyleEditor(self.alert, omit_fill=True, omit_pattern=True))

        self.bind(self.title_field, 'title')
        self.bind(self.node_id, 'id')
        self.bind(self.x, 'x')
        self.bind(self.y, 'y')
        self.bind(self.width, 'width')
        self.bind(self.height, 'height')
        self.bind(self.margin, 'margin')
        self.bind(self.rotate, 'rotate')
        self.bind(self.background, 'background_fill')
        for i, k in enumerate(_CROP_FIELDS):
            self.bind(self.crop[k], self._crop_getter(i), self._crop_setter(i))

        self.widget.children = [
            widgets.HBox([self.title_field, self.node_id]),
            widgets.HBox([self.x, self.y]),
            widgets.HBox([self.width, self.height]),
            widgets.HBox([self.margin, self.rotate]),
            self.background,
            widgets.HBox([self.path, self.load_button, self.image_info]),
            widgets.HBox([self.crop['x'], self.crop['y']]),
            widgets.HBox([self.crop['w'], self.crop['h'], self.reset_crop_button]),
            self.draw_style.widget,
        ]

    @staticmethod
    def _crop_getter(i):
        def getter(node):
            return node.get_crop()[i]
        return getter

    @staticmethod
    def _crop_setter(i):
        def setter(node, value):
            rect = list(node.get_crop())
            rect[i] = value
            return node.set_crop(rect)
        return setter

    def update_enablement(self):
        node = self.node
        has_image = node.has_image()
        for field in self.crop.values():
            field.disabled = not has_image
        self.reset_crop_button.disabled = not (has_image and node.is_cropped())
        if has_image:
            w, h = node.get_image_size()
            self.image_info.value = f"<span style='color:#555;'>{w} x {h} px</span>"
        else:
            self.image_info.value = "<span style='color:#555;'>no image</span>"

    def load_image_file(self, path):
        """Read an image file into the loaded node. Alerts and returns False on failure."""
        node = self.node
        if node is None or not path:
            return False
        try:
            img = load_image(path)
        except ValueError as e:
            logger.warning("%s", e)
            self.image_info.value = f"<span style='color:#B00020;'>⚠️ {e}</span>"
            self.alert()
            return False
        if not node.set_image(img):
            self.alert()
            return False
        self.reload(False)
        return True

    def reset_crop(self):
        node = self.node
        if node is None or not node.reset_crop():
            return False
        self.reload(False)
        return True
