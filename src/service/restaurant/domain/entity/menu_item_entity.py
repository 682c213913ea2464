from typing import Optional

import attrs


@attrs.frozen
class MenuItem:
    """Catalog entry; read-only reference data owned by the menu catalog"""

    id: str
    name: str
    description: str
    price: float
    image: Optional[str] = None
