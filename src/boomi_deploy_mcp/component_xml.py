"""
Component XML shaping for getComponentDetails.

Process and profile components get a compact summary; every other type is
returned in full. The raw XML is always saved to the output directory so the
caller can open the complete document.
"""

import json
import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Optional

from .errors import ParseError

logger = logging.getLogger(__name__)

BNS_URI = 'http://api.platform.boomi.com/'
NO_DESCRIPTION = "No description available."
SUMMARIZED_TYPES = ("process", "profile")


def _local_name(tag: str) -> str:
    return tag.rsplit('}', 1)[-1]


def _extract_description(root) -> str:
    """Extract description from component XML child element."""
    ns = {'bns': BNS_URI}
    desc_elem = root.find('bns:description', ns)
    if desc_elem is not None and desc_elem.text and desc_elem.text.strip():
        return desc_elem.text.strip()
    # Also check without namespace
    desc_elem = root.find('description')
    if desc_elem is not None and desc_elem.text and desc_elem.text.strip():
        return desc_elem.text.strip()
    return NO_DESCRIPTION


@dataclass
class ComponentSummary:
    id: str
    name: str
    type: str
    version: str
    createdBy: str
    createdDate: str
    modifiedBy: str
    modifiedDate: str
    currentVersion: str
    description: str

    @classmethod
    def from_element(cls, root) -> "ComponentSummary":
        """Build a summary from the root <bns:Component> element."""
        attrs = root.attrib
        return cls(
            id=attrs.get('componentId', ''),
            name=attrs.get('name', ''),
            type=attrs.get('type', 'unknown'),
            version=attrs.get('version', ''),
            createdBy=attrs.get('createdBy', ''),
            createdDate=attrs.get('createdDate', ''),
            modifiedBy=attrs.get('modifiedBy', ''),
            modifiedDate=attrs.get('modifiedDate', ''),
            currentVersion=attrs.get('currentVersion', ''),
            description=_extract_description(root),
        )


def parse_component_xml(raw_xml: str):
    """Parse a Component GET response and return its root element.

    Raises:
        ParseError: If the XML is malformed or the root is not a Component
    """
    try:
        root = ET.fromstring(raw_xml)
    except ET.ParseError as e:
        raise ParseError(f"Invalid component XML: {e}") from e

    if _local_name(root.tag) != 'Component':
        raise ParseError(f"Unexpected document root <{_local_name(root.tag)}>, expected <Component>")
    return root


def component_file_path(component_id: str, output_dir: Path) -> Path:
    """Path of the saved XML for a component; the id is reduced to a safe file name."""
    safe_id = re.sub(r'[^A-Za-z0-9._-]', '_', component_id).strip('.') or 'component'
    return Path(output_dir) / f"{safe_id}.xml"


def save_component_xml(raw_xml: str, component_id: str, output_dir: Path) -> Optional[Path]:
    """Write the raw XML to the output directory. Returns None if the write failed."""
    path = component_file_path(component_id, output_dir)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(raw_xml, encoding='utf-8')
    except OSError as e:
        logger.warning("Could not save component XML to %s: %s", path, e)
        return None
    logger.info("Saved component %s XML to %s", component_id, path)
    return path


def shape_component(raw_xml: str, component_id: str, output_dir: Path) -> str:
    """Render a component XML document as the getComponentDetails reply text.

    Raises:
        ParseError: If the XML cannot be parsed into a Component document
    """
    root = parse_component_xml(raw_xml)
    saved = save_component_xml(raw_xml, component_id, output_dir)
    if saved is not None:
        footer = f"Full XML saved to: {saved}"
    else:
        footer = f"Full XML could not be saved to {output_dir}."

    component_type = root.attrib.get('type') or 'unknown'
    if any(kind in component_type for kind in SUMMARIZED_TYPES):
        summary = ComponentSummary.from_element(root)
        return f"Component Summary:\n{json.dumps(asdict(summary), indent=2)}\n\n{footer}"

    return f"Component XML (type: {component_type}):\n{raw_xml}\n\n{footer}"
