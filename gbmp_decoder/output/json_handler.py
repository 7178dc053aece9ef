import json
import logging
from pathlib import Path
from typing import Any, Dict, Union

from ..world.model import WorldModel

logger = logging.getLogger(__name__)


class JSONOutputHandler:
    """Writes a JSON summary of a decoded map"""

    def __init__(self, indent: int = 2):
        self.indent = indent

    def summarize(self, world: WorldModel) -> Dict[str, Any]:
        """Convert a world model into a JSON-serializable dictionary"""
        return {
            'file_path': world.filename,
            'version': world.version,
            'dimensions': {
                'width': world.width,
                'length': world.length,
                'height': world.height
            },
            'occupied_cells': world.occupied_count(),
            'zones': [zone.to_dict() for zone in world.zones],
            'animations': [anim.to_dict() for anim in world.animations],
            'lights': [light.to_dict() for light in world.lights],
            'objects': [obj.to_dict() for obj in world.objects]
        }

    def write(self, world: WorldModel, output_path: Union[str, Path]) -> Path:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.summarize(world), f, indent=self.indent)
        logger.info(f"Results written to {output_path}")
        return output_path
