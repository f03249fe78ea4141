"""HUD elements loaded from YAML layouts."""

from pushball.ui.ui_element import UIElement
from pushball.ui.ui_loader import UILoader, register_element, ELEMENT_REGISTRY
from pushball.ui.ui_manager import UIManager
from pushball.ui.elements.label import UILabel
from pushball.ui.elements.button import UIButton

__all__ = ['UIElement', 'UILoader', 'register_element', 'ELEMENT_REGISTRY',
           'UIManager', 'UILabel', 'UIButton']
