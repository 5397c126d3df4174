from typing import Annotated

from fastapi import Depends

from cipher_machine.core.config import Settings, get_settings


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]
