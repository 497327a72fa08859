from xml.etree import ElementTree as ET

XSI_NIL = "{http://www.w3.org/2001/XMLSchema-instance}nil"


def _local_name(tag):
    # Remove namespace prefix if present
    if "}" in tag:
        return tag.split("}", 1)[1]
    return tag


def xml_to_dict(xml_string):
    """Converte um documento XML (str ou bytes) em dict, sem namespaces.

    Elementos folha viram a string do seu texto ("" quando vazios),
    elementos com xsi:nil="true" viram None e tags repetidas viram lista.
    Lança ET.ParseError para XML mal formado.
    """
    root = ET.fromstring(xml_string)

    def parse_element(element):
        if element.attrib.get(XSI_NIL) == "true":
            return None

        result = {}

        for key, value in element.attrib.items():
            if key != XSI_NIL:
                result[_local_name(key)] = value

        for child in element:
            child_data = parse_element(child)
            tag = _local_name(child.tag)

            # If we already have this tag, convert to list
            if tag in result:
                if not isinstance(result[tag], list):
                    result[tag] = [result[tag]]
                result[tag].append(child_data)
            else:
                result[tag] = child_data

        text = element.text.strip() if element.text else ""

        if not result:
            return text

        if text:
            result["_text"] = text

        return result

    return parse_element(root)
