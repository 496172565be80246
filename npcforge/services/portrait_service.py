"""Portrait requests for character records."""

import base64
import logging

from npcforge.llm.base import ImageProvider
from npcforge.schemas.character import CharacterRecord
from npcforge.services.prompts import apply_style, build_portrait_prompt

logger = logging.getLogger(__name__)

_PLACEHOLDER_SVG = """<svg xmlns="http://www.w3.org/2000/svg" width="512" height="512" viewBox="0 0 512 512">
<rect width="512" height="512" fill="#2a2a2a"/>
<text x="256" y="240" font-family="sans-serif" font-size="160" fill="#888" text-anchor="middle">?</text>
<text x="256" y="330" font-family="sans-serif" font-size="28" fill="#888" text-anchor="middle">Portrait Coming Soon</text>
</svg>"""

PLACEHOLDER_PORTRAIT = "data:image/svg+xml;base64," + base64.b64encode(
    _PLACEHOLDER_SVG.encode("utf-8")
).decode("ascii")


class PortraitService:
    """Builds a portrait prompt and stores the result on the appearance."""

    def __init__(self, provider: ImageProvider, style: str = "photorealistic") -> None:
        self.provider = provider
        self.style = style

    def prompt_for(self, record: CharacterRecord, style: str | None = None) -> str:
        return apply_style(build_portrait_prompt(record.appearance), style or self.style)

    async def generate(self, record: CharacterRecord, style: str | None = None) -> str:
        """Request a portrait and write it to ``appearance.portrait``.

        Returns:
            The portrait reference; the placeholder when the provider fails.
        """
        prompt = self.prompt_for(record, style)
        try:
            image = await self.provider.generate_image(prompt)
            portrait = image.url
        except Exception as e:
            logger.warning("Portrait generation failed for %s: %s", record.name, e)
            portrait = PLACEHOLDER_PORTRAIT
        record.appearance.portrait = portrait
        return portrait
