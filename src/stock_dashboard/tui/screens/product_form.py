"""Modal form for creating and editing a product."""

from dataclasses import dataclass
from typing import ClassVar

from textual import on
from textual.app import ComposeResult
from textual.binding import Binding, BindingType
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static, TextArea

from ...form import FORM_FIELDS, STARRED_FIELDS, ProductDraft, submit
from ...models import Product, ProductFields


@dataclass(frozen=True)
class SavedProduct:
    """Result of a successful submit: the fields and the target id, if any."""

    fields: ProductFields
    product_id: int | None = None


class ProductFormScreen(ModalScreen[SavedProduct | None]):
    """Create or edit a product.

    Edits are staged in a ProductDraft and only leave the screen through
    dismiss() once validation passes. Cancel dismisses with None.
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("escape", "cancel", "Cancel", show=False),
        Binding("ctrl+s", "save", "Save", show=False),
    ]

    DEFAULT_CSS = """
    ProductFormScreen {
        align: center middle;
    }
    #form-dialog {
        width: 64;
        height: auto;
        max-height: 90%;
        padding: 1 2;
        background: $surface;
        border: round $accent;
    }
    #form-dialog #form-title {
        color: cyan;
        text-style: bold;
        margin-bottom: 1;
    }
    #form-dialog Label {
        margin-top: 1;
    }
    #form-dialog TextArea {
        height: 5;
    }
    #form-dialog .error {
        color: $error;
        height: auto;
        display: none;
    }
    #form-actions {
        height: auto;
        margin-top: 1;
        align: right middle;
    }
    #form-actions Button {
        margin-left: 1;
    }
    """

    def __init__(self, product: Product | None = None) -> None:
        super().__init__()
        self.draft = ProductDraft.from_product(product)
        self.errors: dict[str, str] = {}

    def compose(self) -> ComposeResult:
        with Vertical(id="form-dialog"):
            yield Static(self.draft.title, id="form-title")
            for field in FORM_FIELDS:
                label = field + (" *" if field in STARRED_FIELDS else "")
                yield Label(label, classes="field-label")
                value = getattr(self.draft, field)
                if field == "description":
                    yield TextArea(value, id=f"field-{field}")
                else:
                    yield Input(value=value, id=f"field-{field}")
                yield Static("", id=f"error-{field}", classes="error")
            with Horizontal(id="form-actions"):
                yield Button("Cancel", id="cancel")
                yield Button("Save", id="save", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#field-name", Input).focus()

    @on(Input.Changed)
    def _on_input_changed(self, event: Input.Changed) -> None:
        field = (event.input.id or "").removeprefix("field-")
        if field in FORM_FIELDS:
            self.draft = self.draft.with_value(field, event.value)

    @on(TextArea.Changed)
    def _on_text_changed(self, event: TextArea.Changed) -> None:
        self.draft = self.draft.with_value("description", event.text_area.text)

    @on(Input.Submitted)
    def _on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_save()

    @on(Button.Pressed, "#save")
    def _on_save_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.action_save()

    @on(Button.Pressed, "#cancel")
    def _on_cancel_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.action_cancel()

    def action_save(self) -> None:
        """Validate the draft; dismiss with the coerced fields if it passes."""
        self.errors = submit(self.draft, self._save)
        if self.errors:
            self._show_errors()

    def action_cancel(self) -> None:
        """Discard staged edits and dismiss."""
        self.dismiss(None)

    def _save(self, fields: ProductFields, product_id: int | None) -> None:
        self.dismiss(SavedProduct(fields, product_id))

    def _show_errors(self) -> None:
        for field in FORM_FIELDS:
            error = self.query_one(f"#error-{field}", Static)
            error.update(self.errors.get(field, ""))
            error.display = field in self.errors
