from typing import List, Optional, Union

from pydantic import BaseModel


class EnqueuedStyle(BaseModel):
    handle: str
    src: str
    dependencies: List[str] = []
    version: Optional[str] = None


class EnqueuedScript(EnqueuedStyle):
    in_footer: bool = False


EnqueuedAsset = Union[EnqueuedStyle, EnqueuedScript]
