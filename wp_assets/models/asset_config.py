from typing import Optional

from pydantic import BaseModel

from wp_assets.misc.utils import join_path, join_url
from wp_assets.models.enums import EnqueueStrategy


class AssetConfig(BaseModel):
    base_url: str
    base_dir: str
    output_dir: str = "public"
    manifest_file: str = "manifest.json"
    manifest_path: Optional[str] = None
    manifest_required: bool = False
    strategy: EnqueueStrategy = EnqueueStrategy.ENTRYPOINT
    namespace: str = "wpa"

    @property
    def public_url(self) -> str:
        return join_url(self.base_url, self.output_dir)

    @property
    def public_dir(self) -> str:
        return join_path(self.base_dir, self.output_dir)

    @property
    def resolved_manifest_path(self) -> str:
        if self.manifest_path:
            return self.manifest_path
        return join_path(self.public_dir, self.manifest_file)
