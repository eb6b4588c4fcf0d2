"""
3-D surface property editor
"""

import ipywidgets as widgets

from ..core.controls import int_field, text_field
from ..core.editor import NodeEditor
from ..fig.node import NodeType
from .data import DataSetCard
from .draw_style import DrawStyleEditor


class SurfaceEditor(NodeEditor):
    node_type = NodeType.SURFACE
    icon = 'cubes'
    title = '3D Surface'

    def __init__(self, alert=None):
        super().__init__(alert)
        self.title_field = self.register_text_field(text_field('Title:'))
        self.mesh_limit = int_field('Mesh limit:')
        self.color_mapped = widgets.Checkbox(description='Color-mapped', indent=False)

        self.data_set = self.add_panel(DataSetCard(self.alert))
        self.draw_style = self.add_panel(DrawStyleEditor(self.alert))

        self.bind(self.title_field, 'title')
        self.bind(self.mesh_limit, 'mesh_limit')
        self.bind(self.color_mapped, 'color_mapped')

        self.widget.children = [
            self.title_field,
            widgets.HBox([self.mesh_limit, self.color_mapped]),
            self.data_set.widget,
            self.draw_style.widget,
        ]
