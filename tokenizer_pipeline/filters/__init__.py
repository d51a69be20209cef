"""Token filters."""

from .remove_long import RemoveLongFilter  # noqa: F401
from .lower_caser import LowerCaser  # noqa: F401
from .stemmer import StemmerFilter  # noqa: F401
from .stop_words import StopWordFilter  # noqa: F401
from .alpha_num_only import AlphaNumOnlyFilter  # noqa: F401
from .ascii_folding import AsciiFoldingFilter  # noqa: F401
