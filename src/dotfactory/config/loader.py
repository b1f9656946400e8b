"""
Preset Loader

Reads and writes an ordered list of output configuration presets as YAML,
JSON or XML. The format is chosen from the file suffix; anything that is not
YAML or JSON is XML in the layout of the original desktop application's
preset file.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

import yaml
from lxml import etree
from pydantic import ValidationError

from ..errors import PersistenceError, PresetDecodeError
from ..text_utils import element_text, sub_element
from .schema import OutputConfiguration

logger = logging.getLogger(__name__)

FORMAT_VERSION = "1.0"

XML_ROOT_TAG = "ArrayOfOutputConfiguration"
XML_RECORD_TAG = "OutputConfiguration"

YAML_SUFFIXES = ('.yaml', '.yml')
JSON_SUFFIXES = ('.json',)


def preset_format(path: Union[str, Path]) -> str:
    """Get the storage format for a preset file path: 'yaml', 'json' or 'xml'."""
    suffix = Path(path).suffix.lower()
    if suffix in YAML_SUFFIXES:
        return 'yaml'
    if suffix in JSON_SUFFIXES:
        return 'json'
    return 'xml'


def dump_presets(presets: Iterable[OutputConfiguration]) -> List[Dict[str, Any]]:
    """Convert presets to plain records keyed by their file field names.

    Enums are stored by symbolic value.
    """
    return [preset.model_dump(mode='json', by_alias=True) for preset in presets]


def parse_presets(data: Any) -> List[OutputConfiguration]:
    """Parse decoded YAML/JSON data into presets.

    Accepts either a document with a 'presets' list or a bare list of records.

    Args:
        data: Decoded document

    Returns:
        Presets in file order

    Raises:
        PresetDecodeError: If the data is not a preset list
    """
    if data is None:
        raise PresetDecodeError("Preset document is empty")
    if isinstance(data, dict):
        if 'presets' not in data:
            raise PresetDecodeError("Preset document has no 'presets' list")
        records = data['presets']
    else:
        records = data

    # An empty YAML "presets:" key decodes as None
    if records is None:
        return []
    if not isinstance(records, list):
        raise PresetDecodeError(f"Expected a list of presets, got {type(records).__name__}")

    presets = []
    for idx, record in enumerate(records):
        if isinstance(record, OutputConfiguration):
            presets.append(record)
            continue
        if not isinstance(record, dict):
            raise PresetDecodeError(f"Preset {idx} is not a mapping")
        try:
            presets.append(OutputConfiguration.model_validate(record))
        except ValidationError as e:
            raise PresetDecodeError(f"Preset {idx} is invalid: {e}") from e
    return presets


def presets_to_xml(presets: Iterable[OutputConfiguration]) -> bytes:
    """Serialize presets to an XML document."""
    root = etree.Element(XML_ROOT_TAG)
    for record in dump_presets(presets):
        element = etree.SubElement(root, XML_RECORD_TAG)
        for tag, value in record.items():
            sub_element(element, tag, value)
    return etree.tostring(root, xml_declaration=True, encoding='utf-8', pretty_print=True)


def presets_from_xml(data: bytes) -> List[OutputConfiguration]:
    """Parse an XML preset document.

    Raises:
        PresetDecodeError: If the document is malformed or is not a preset list
    """
    try:
        root = etree.fromstring(data, parser=etree.XMLParser(resolve_entities=False))
    except etree.XMLSyntaxError as e:
        raise PresetDecodeError(f"Malformed preset XML: {e}") from e

    if etree.QName(root).localname != XML_ROOT_TAG:
        raise PresetDecodeError(f"Unexpected root element: {root.tag}")

    records = []
    for element in root:
        if not isinstance(element.tag, str):
            continue  # comments, processing instructions
        if etree.QName(element).localname != XML_RECORD_TAG:
            raise PresetDecodeError(f"Unexpected element in preset list: {element.tag}")
        records.append({
            etree.QName(child).localname: element_text(child)
            for child in element
            if isinstance(child.tag, str)
        })
    return parse_presets(records)


def load_presets(path: Union[str, Path]) -> List[OutputConfiguration]:
    """Load presets from a YAML, JSON or XML file.

    Args:
        path: Path to the preset file

    Returns:
        Presets in file order

    Raises:
        PersistenceError: If the file cannot be read
        PresetDecodeError: If the content is not a valid preset list
    """
    path = Path(path)
    fmt = preset_format(path)

    try:
        with open(path, 'rb') as f:
            raw = f.read()
    except OSError as e:
        raise PersistenceError(f"Cannot read preset file {path}: {e}") from e

    if fmt == 'xml':
        presets = presets_from_xml(raw)
    else:
        try:
            if fmt == 'yaml':
                data = yaml.safe_load(raw)
            else:
                data = json.loads(raw.decode('utf-8'))
        except (yaml.YAMLError, ValueError, RecursionError) as e:
            raise PresetDecodeError(f"Malformed preset file {path}: {e}") from e
        presets = parse_presets(data)

    logger.debug("Loaded %d presets from %s", len(presets), path)
    return presets


def save_presets(presets: Iterable[OutputConfiguration], path: Union[str, Path]) -> None:
    """Save presets to a YAML, JSON or XML file, replacing its content.

    The file is written in place. If writing fails part way the destination
    may be left truncated.

    Args:
        presets: Presets in the order to store them
        path: Output file path

    Raises:
        PersistenceError: If the file cannot be written
    """
    path = Path(path)
    fmt = preset_format(path)
    presets = list(presets)

    if fmt == 'xml':
        payload = presets_to_xml(presets)
    else:
        document = {'version': FORMAT_VERSION, 'presets': dump_presets(presets)}
        if fmt == 'yaml':
            payload = yaml.safe_dump(
                document, default_flow_style=False, sort_keys=False, allow_unicode=True
            ).encode('utf-8')
        else:
            payload = json.dumps(document, indent=2).encode('utf-8')

    try:
        with open(path, 'wb') as f:
            f.write(payload)
    except OSError as e:
        raise PersistenceError(f"Cannot write preset file {path}: {e}") from e

    logger.info("Saved %d presets to %s (%s)", len(presets), path, fmt)
