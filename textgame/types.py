"""Common type aliases.

``ReadLine`` and ``WriteLine`` are the injected terminal capabilities used by
the loop driver. ``ReadLine`` returns ``None`` once input is exhausted.
"""

from typing import Callable, Optional

ReadLine = Callable[[], Optional[str]]
WriteLine = Callable[[str], None]
