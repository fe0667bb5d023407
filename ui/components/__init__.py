"""
This package provides a collection of reusable UI components for the Streamlit application.

It is organized into several modules, each containing a specific category of components:
- `base`: Basic, general-purpose components like CSS injectors and status badges.
- `cards`: Dashboard stat cards and read-only record details.
- `table`: The generic record table used by every list page.
- `confirm`: Confirmation prompt for destructive actions.
- `admin_form`, `candidate_form`, `company_form`: Create/edit forms per record kind.

By importing the components here, we provide a single, consistent access point
for the rest of the application (`from ui import components`).
"""

from .base import (
    inject_base_css,
    status_badge,
    status_label,
    skill_chips,
)

from .cards import (
    stat_card,
    record_details,
)

from .table import (
    build_frame,
    render_table,
)

from .confirm import (
    confirm_dialog,
    request_confirmation,
)

from .forms import show_errors
