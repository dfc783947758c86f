from typing import List

from pydantic import BaseModel


class EntrypointAssets(BaseModel):
    css: List[str] = []
    js: List[str] = []
    php: List[str] = []
