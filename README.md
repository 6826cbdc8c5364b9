# lumen_blocks

Styled UI components for Python, with accessibility attributes built in.
Each component function returns a `Node` tree. A `Node` is a small element
model: you can search it, fire events on it and render it to HTML. The
classes follow Tailwind conventions, in the spirit of shadcn/ui.

The package uses only the standard library.

## Installation

```
pip install lumen_blocks
```

## Modules

| Module | What it provides |
| --- | --- |
| `lumen_blocks.core` | `Node`, `Signal`, `IdGenerator`, `unique_id`, `reset_ids`, `id_or`, `join_classes`, `prepend_classes` |
| `lumen_blocks.accordion` | `accordion`, `accordion_item`, `accordion_trigger`, `accordion_content` |
| `lumen_blocks.aspect_ratio` | `aspect_ratio` |
| `lumen_blocks.avatar` | `avatar`, `avatar_image`, `avatar_fallback` |
| `lumen_blocks.button` | `button`, `button_classes`, `ButtonVariant`, `ButtonSize` |
| `lumen_blocks.checkbox` | `checkbox`, `CheckboxSize` |
| `lumen_blocks.collapsible` | `collapsible`, `collapsible_trigger`, `collapsible_content` |
| `lumen_blocks.context_menu` | `context_menu`, `context_menu_trigger`, `context_menu_content`, `context_menu_label`, `context_menu_separator`, `context_menu_item`, `context_menu_checkbox_item`, `ContextMenuRadioGroup` |
| `lumen_blocks.dropdown` | `Dropdown`, `dropdown_trigger`, `dropdown_content`, `dropdown_label`, `dropdown_separator`, `dropdown_item`, `dropdown_checkbox_item`, `DropdownRadioGroup`, `DropdownSize` |
| `lumen_blocks.hover_card` | `hover_card`, `hover_card_trigger`, `hover_card_content`, `HoverCardSide`, `HoverCardAlign` |
| `lumen_blocks.input` | `text_input`, `input_classes`, `InputSize`, `InputVariant` |
| `lumen_blocks.label` | `label`, `LabelSize` |
| `lumen_blocks.menubar` | `menubar`, `menubar_menu`, `menubar_trigger`, `menubar_content`, `menubar_item` |
| `lumen_blocks.progress` | `progress`, `progress_percentage`, `ProgressSize`, `ProgressVariant` |
| `lumen_blocks.side_sheet` | `SideSheet`, `SideSheetSide`, `side_sheet_header`, `side_sheet_title`, `side_sheet_description`, `side_sheet_body`, `side_sheet_footer` |
| `lumen_blocks.switch` | `switch`, `SwitchSize` |
| `lumen_blocks.toast` | `Toasts`, `ToastItem`, `ToastOptions`, `ToastType`, `use_toast`, `toast`, `toast_provider` |

## Building and rendering components

```python
from lumen_blocks.button import button, ButtonVariant, ButtonSize

node = button("Save", variant=ButtonVariant.PRIMARY, size=ButtonSize.LARGE)
print(node.to_html())
```

Components that take children accept them as positional arguments. All
other options are keyword arguments. `class_` carries a trailing
underscore because `class` is a Python keyword. Where a component has an
`attributes` option, that dict is merged into the element's attributes.

```python
from lumen_blocks.accordion import (
    accordion, accordion_item, accordion_trigger, accordion_content,
)

tree = accordion(
    accordion_item(
        accordion_trigger("What is it?"),
        accordion_content("A set of components."),
        index=0,
    ),
    allow_multiple_open=True,
)
```

When `to_html` renders a node, attributes that are `None` or `False` are
left out. An attribute that is `True` is written as a bare attribute name.
Text is HTML-escaped.

## Identifiers

An element that is given no `id` gets one of the form `dxc-<n>` from a
shared, thread-safe counter. `lumen_blocks.core.reset_ids()` starts the
counter from zero again, which is useful in tests.

## Working with the node tree

- `Node.iter()` walks the tree depth first.
- `Node.find(predicate)` returns the first matching node.
- `Node.find_all(predicate)` returns every matching node.
- `Node.trigger(event, *args)` calls the handler registered for `event`,
  for example `node.trigger("click")`. It raises `KeyError` if the node has
  no handler for that event.
- `Signal` holds a value. Components read it, and some write it: a
  checkbox or switch that toggles sets its signal. `Signal.subscribe`
  registers a callback that runs on each `set` and returns a function that
  unsubscribes it.

```python
from lumen_blocks.core import Signal
from lumen_blocks.switch import switch

state = Signal(False)
node = switch(checked=state, on_checked_change=print)
node.trigger("click")   # prints True; state.value is now True
```

The checkbox is different: clicking it changes the value only when an
`on_checked_change` handler is given.

## Stateful components

Components that hold state are classes:

- `Dropdown` keeps its open state in the `is_open` signal. `render(...)`
  wires any `dropdown_trigger` inside it to toggle the menu on click, and
  shows or hides any `dropdown_content` to match the state. `focus_out()`
  starts a timer that closes the menu after `close_delay` seconds (0.2 by
  default) and returns that timer.
- `SideSheet` tracks whether it is open and which `SideSheetSide` it slides
  in from. `trigger(...)` builds an element that opens the sheet. `close(...)`,
  `overlay()` and `close_button()` build elements that close it.
- `ContextMenuRadioGroup` and `DropdownRadioGroup` hold the selected value.
  Items made with `item(...)` pass their value to the group's
  `on_value_change` when selected. Calling `item` on a group that has no
  `on_value_change` raises `RuntimeError`.

## Progress

`progress_percentage(value, max)` clamps the result to the range 0 to 100.
A ratio that cannot be computed, such as 0 of 0, counts as 100.

## Toasts

```python
from lumen_blocks.toast import use_toast, ToastOptions, toast_provider

toasts = use_toast()
toasts.success("Saved", ToastOptions(description="All changes stored"))
page = toast_provider("content", toasts=toasts)
```

`use_toast()` returns one store shared by the whole application. You can
also create your own `Toasts()` and pass it as `toasts=`. The store keeps at
most ten toasts. When there are more, it drops the oldest non-permanent
toast first; if every toast is permanent, it drops the oldest one. The
`max_toasts` option of `toast_provider` is accepted but does not change this
limit.

Each time a non-permanent toast is rendered, a timer starts that marks it
hidden once its duration has passed. The duration is given in seconds and
defaults to `default_duration`, which is 5.0. A hidden toast is removed from
the store when its `animationend` event fires.

## What it does not do

The package builds element trees and HTML strings, and nothing more. It
does not ship a stylesheet or any JavaScript. It does not run a browser or
a server. Events fire only when your code calls `Node.trigger`. If you
change a `Signal` after rendering, the node is not updated; call the
component again to get a fresh tree.

## Running the tests

```
pip install -e .[test]
pytest
```