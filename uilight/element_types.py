"""UI element kinds and their debug-description / query names."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping


class ElementType(Enum):
    """Element kind; the value is the name used in debug descriptions."""

    OTHER = "Other"
    APPLICATION = "Application"
    ACTIVITY_INDICATOR = "ActivityIndicator"
    ALERT = "Alert"
    BUTTON = "Button"
    BROWSER = "Browser"
    CELL = "Cell"
    CHECK_BOX = "CheckBox"
    COLLECTION_VIEW = "CollectionView"
    COLOR_WELL = "ColorWell"
    COMBO_BOX = "ComboBox"
    DATE_PICKER = "DatePicker"
    DECREMENT_ARROW = "DecrementArrow"
    DIALOG = "Dialog"
    DISCLOSURE_TRIANGLE = "DisclosureTriangle"
    DOCK_ITEM = "DockItem"
    DRAWER = "Drawer"
    GRID = "Grid"
    GROUP = "Group"
    HANDLE = "Handle"
    HELP_TAG = "HelpTag"
    ICON = "Icon"
    IMAGE = "Image"
    INCREMENT_ARROW = "IncrementArrow"
    KEY = "Key"
    KEYBOARD = "Keyboard"
    LAYOUT_AREA = "LayoutArea"
    LAYOUT_ITEM = "LayoutItem"
    LEVEL_INDICATOR = "LevelIndicator"
    LINK = "Link"
    MAP = "Map"
    MATTE = "Matte"
    MENU = "Menu"
    MENU_BAR = "MenuBar"
    MENU_BAR_ITEM = "MenuBarItem"
    MENU_BUTTON = "MenuButton"
    MENU_ITEM = "MenuItem"
    NAVIGATION_BAR = "NavigationBar"
    OUTLINE = "Outline"
    OUTLINE_ROW = "OutlineRow"
    PAGE_INDICATOR = "PageIndicator"
    PICKER = "Picker"
    PICKER_WHEEL = "PickerWheel"
    POPOVER = "Popover"
    POP_UP_BUTTON = "PopUpButton"
    PROGRESS_INDICATOR = "ProgressIndicator"
    RADIO_BUTTON = "RadioButton"
    RADIO_GROUP = "RadioGroup"
    RATING_INDICATOR = "RatingIndicator"
    RELEVANCE_INDICATOR = "RelevanceIndicator"
    RULER = "Ruler"
    RULER_MARKER = "RulerMarker"
    SCROLL_BAR = "ScrollBar"
    SCROLL_VIEW = "ScrollView"
    SEARCH_FIELD = "SearchField"
    SECURE_TEXT_FIELD = "SecureTextField"
    SEGMENTED_CONTROL = "SegmentedControl"
    SHEET = "Sheet"
    SLIDER = "Slider"
    SPLIT_GROUP = "SplitGroup"
    SPLITTER = "Splitter"
    STATIC_TEXT = "StaticText"
    STATUS_BAR = "StatusBar"
    STEPPER = "Stepper"
    SWITCH = "Switch"
    TAB = "Tab"
    TAB_BAR = "TabBar"
    TAB_GROUP = "TabGroup"
    TABLE = "Table"
    TABLE_COLUMN = "TableColumn"
    TABLE_ROW = "TableRow"
    TEXT_FIELD = "TextField"
    TEXT_VIEW = "TextView"
    TIMELINE = "Timeline"
    TOGGLE = "Toggle"
    TOOLBAR = "Toolbar"
    TOOLBAR_BUTTON = "ToolbarButton"
    VALUE_INDICATOR = "ValueIndicator"
    WEB_VIEW = "WebView"
    WINDOW = "Window"

    @property
    def debug_name(self) -> str:
        return self.value

    @property
    def query_name(self) -> str:
        """Built-in plural used to query elements of this kind."""
        if self in IRREGULAR_PLURALS:
            return IRREGULAR_PLURALS[self]
        return f"{self.value[:1].lower()}{self.value[1:]}s"


# debug name -> type
_BY_DEBUG_NAME: dict[str, ElementType] = {t.value: t for t in ElementType}

# Query names that don't follow the lower-first-letter + "s" rule
IRREGULAR_PLURALS: dict[ElementType, str] = {
    ElementType.CHECK_BOX: "checkBoxes",
    ElementType.COMBO_BOX: "comboBoxes",
    ElementType.SWITCH: "switches",
    ElementType.OTHER: "otherElements",
}


def from_debug_name(name: str) -> ElementType:
    """Resolve a debug-description type token, falling back to OTHER."""
    return _BY_DEBUG_NAME.get(name, ElementType.OTHER)


def is_known_debug_name(name: str) -> bool:
    return name in _BY_DEBUG_NAME


def plural_name(element_type: ElementType, plurals: Mapping[ElementType, str] | None = None) -> str:
    """Query name for element_type; an entry in plurals wins over the built-in one."""
    if plurals and element_type in plurals:
        return plurals[element_type]
    return element_type.query_name


def resolve_plurals(overrides: Mapping[str, str]) -> dict[ElementType, str]:
    """Key configured query names by element type; debug names must be known."""
    unknown = [name for name in overrides if name not in _BY_DEBUG_NAME]
    if unknown:
        raise ValueError(f"Unknown element type(s) in plurals: {', '.join(sorted(unknown))}")
    return {_BY_DEBUG_NAME[k]: v for k, v in overrides.items()}
