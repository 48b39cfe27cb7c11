class UIKeys:
    """Keys for UI widgets in ``st.session_state``.

    The ``form.*`` keys make up the live form that is bound to the current
    variant page.
    """

    NAME = "form.name"
    DESCRIPTION = "form.description"
    MRP_PRICE = "form.mrp_price"
    SELLING_PRICE = "form.selling_price"
    CATEGORY = "form.category"
    SUBCATEGORY = "form.subcategory"
    IS_RETURNABLE = "form.is_returnable"
    SELECTED_COLOR = "form.selected_color"
    SELECTED_SIZES = "form.selected_sizes"
    FILES = "form.files"
    IMAGES = "form.images"

    SIZE_SELECT = "ui.size_select"
    QUANTITY_INPUT = "ui.quantity_input"
    FILE_UPLOADER = "ui.file_uploader"
    UPLOADER_NONCE = "ui.file_uploader_nonce"
    LANG_SELECT = "ui.lang_select"


# Fields copied between the live form and a ``ProductPage`` snapshot.
FORM_FIELD_KEYS: dict[str, str] = {
    "name": UIKeys.NAME,
    "description": UIKeys.DESCRIPTION,
    "mrp_price": UIKeys.MRP_PRICE,
    "selling_price": UIKeys.SELLING_PRICE,
    "category": UIKeys.CATEGORY,
    "subcategory": UIKeys.SUBCATEGORY,
    "is_returnable": UIKeys.IS_RETURNABLE,
    "selected_color": UIKeys.SELECTED_COLOR,
    "selected_sizes": UIKeys.SELECTED_SIZES,
    "files": UIKeys.FILES,
    "images": UIKeys.IMAGES,
}

# Variant-specific fields cleared when a new page is created.
VARIANT_FIELD_KEYS: tuple[str, ...] = (
    "selected_color",
    "selected_sizes",
    "files",
    "images",
)


class StateKeys:
    """Keys for data stored in ``st.session_state``."""

    VARIANT_STORE = "wizard.variant_store"
    PREVIEW_REGISTRY = "wizard.preview_registry"
    WIZARD_ERROR = "wizard.error"
    WIZARD_NOTICE = "wizard.notice"
    LAST_REPORT = "wizard.last_submission"
    SESSION_ID = "wizard.session_id"
