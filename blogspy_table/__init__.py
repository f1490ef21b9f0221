from .app.application.actions import BulkAction, BulkActionMenu
from .app.application.data_table import DataTable
from .app.application.state.query_state import QueryState
from .app.config import TableSettings, load_settings
from .app.domain.models.column import Align, ColumnDef
from .app.domain.models.row import FieldValue, get_field, row_id
from .app.errors import TableConfigError, TableError, UnknownActionError
from .app.export.csv_exporter import export_current_view
from .app.schemas import PaginationMeta, TableOptions
from .app.ui.filters import filter_rows
from .app.ui.listing_view import EMPTY_VALUE, SortDirection, sort_rows
from .app.ui.pagination import PageSlice, paginate
from .app.ui.table_printer import format_table, print_table
from .app.ui.view_state import TableView, TableViewStatus

__all__ = [
    "Align",
    "BulkAction",
    "BulkActionMenu",
    "ColumnDef",
    "DataTable",
    "EMPTY_VALUE",
    "FieldValue",
    "PageSlice",
    "PaginationMeta",
    "QueryState",
    "SortDirection",
    "TableConfigError",
    "TableError",
    "TableOptions",
    "TableSettings",
    "TableView",
    "TableViewStatus",
    "UnknownActionError",
    "export_current_view",
    "filter_rows",
    "format_table",
    "get_field",
    "load_settings",
    "paginate",
    "print_table",
    "row_id",
    "sort_rows",
]
