"""RawSpeed ``cameras.xml`` extractor.

Layout::

    <Cameras>
      <Camera make="Canon" model="Canon EOS 5D" mode="sRaw1" supported="no">
        <ID make="Canon" model="EOS 5D">Canon EOS 5D</ID>
        <Aliases>
          <Alias id="5D">Canon 5D</Alias>
        </Aliases>
      </Camera>
    </Cameras>
"""

from xml.etree import ElementTree

from camera_support.extract.base import ExtractError
from camera_support.models import CameraFact

SOURCE_NAME = "cameras.xml"

DEBUG_NO_MODEL_CAMERA = "cameras.xml: No Model in Camera element"
DEBUG_NO_MODEL_ID = "cameras.xml: No Model in ID element"
DEBUG_NO_ALIAS_ID = "cameras.xml: No id in Alias"


def _camera_identity(element: ElementTree.Element) -> tuple[str, str, list[str]]:
    """Return maker, model and diagnostics for one ``<Camera>``."""
    debug: list[str] = []
    id_element = element.find("ID")
    if id_element is not None:
        maker = id_element.attrib.get("make", "")
        model = id_element.attrib.get("model", "")
        if not model:
            debug.append(DEBUG_NO_MODEL_ID)
    else:
        maker = element.attrib.get("make", "")
        model = element.attrib.get("model", "")
        if not model:
            debug.append(DEBUG_NO_MODEL_CAMERA)
    return maker, model, debug


def _camera_aliases(element: ElementTree.Element, maker: str) -> tuple[list[str], list[str]]:
    """Return aliases and diagnostics for one ``<Camera>``."""
    aliases: list[str] = []
    debug: list[str] = []
    aliases_element = element.find("Aliases")
    if aliases_element is None:
        return aliases, debug

    for alias_element in aliases_element.findall("Alias"):
        alias = alias_element.attrib.get("id", "")
        if not alias:
            # Fall back to the text with the maker prefix removed
            alias = (alias_element.text or "").strip().removeprefix(maker + " ")
            debug.append(DEBUG_NO_ALIAS_ID)
        if alias:
            aliases.append(alias)
    return aliases, debug


def extract_rawspeed(payload: bytes) -> list[CameraFact]:
    """Extract camera facts from a ``cameras.xml`` payload.

    Parameters
    ----------
    payload : bytes
        Raw XML document.

    Returns
    -------
    list[CameraFact]
        One fact per ``<Camera>`` element, in document order.

    Raises
    ------
    ExtractError
        If the payload is not XML or its root is not ``<Cameras>``.
    """
    try:
        root = ElementTree.fromstring(payload)
    except (ElementTree.ParseError, LookupError, ValueError) as e:
        raise ExtractError(f"Unable to parse {SOURCE_NAME}: {e}", source=SOURCE_NAME) from e

    if root.tag != "Cameras":
        raise ExtractError(
            f"Unable to parse {SOURCE_NAME}: root element is <{root.tag}>, expected <Cameras>",
            source=SOURCE_NAME,
        )

    facts: list[CameraFact] = []
    for element in root.findall("Camera"):
        maker, model, debug = _camera_identity(element)
        aliases, alias_debug = _camera_aliases(element, maker)
        facts.append(
            CameraFact(
                maker=maker,
                model=model,
                aliases=tuple(aliases),
                format=element.attrib.get("mode") or None,
                supported=element.attrib.get("supported", ""),
                debug=tuple(debug + alias_debug),
            )
        )
    return facts
