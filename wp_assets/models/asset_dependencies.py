from typing import List, Optional

from pydantic import BaseModel


class AssetDependencies(BaseModel):
    dependencies: List[str] = []
    version: Optional[str] = None
