from typing import Optional

import attrs


@attrs.define
class UserEntity:
    name: str = ''
    email: str = ''
    id: Optional[int] = None
