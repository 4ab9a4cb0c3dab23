"""Provider module whose own import fails."""

import extendedenum_missing_dependency  # noqa: F401
