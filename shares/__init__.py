"""Share documents, reconstruction and dealing."""

from shares.document import (
    RESERVED_KEY, SchemaLoader, DocumentValidator, SharePoint, ShareEntry,
    ShareDocument, parse_document, load_document,
)
from shares.reconstruct import (
    ORDER_BY_X, ORDER_AS_GIVEN, DEFAULT_ORDER, Reconstruction, select_points,
    build_matrix, reconstruct_points, reconstruct,
)
from shares.dealer import deal, write_document, DEFAULT_BOUND
