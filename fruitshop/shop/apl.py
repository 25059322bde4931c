# fruitshop/shop/apl.py
from __future__ import annotations

from typing import Any, Dict, List

APL_VERSION = "1.3"
LIST_ICON_URL = "https://ask-portiao.s3-us-west-2.amazonaws.com/list.png"
CART_ICON_URL = "https://ask-portiao.s3-us-west-2.amazonaws.com/cart.png"


def _base_document(parameter: str, items: List[Dict[str, Any]]) -> Dict[str, Any]:
    return {
        "type": "APL",
        "version": APL_VERSION,
        "import": [{"name": "alexa-layouts", "version": "1.1.0"}],
        "mainTemplate": {
            "parameters": [parameter],
            "items": [
                {
                    "type": "Container",
                    "width": "100%",
                    "height": "100%",
                    "items": items,
                }
            ],
        },
    }


def _icon(source: str) -> Dict[str, Any]:
    return {
        "type": "Container",
        "position": "absolute",
        "right": "0",
        "top": "40dp",
        "width": "100dp",
        "height": "100dp",
        "items": [
            {
                "type": "Image",
                "width": "60",
                "height": "60",
                "source": source,
                "align": "top-right",
                "scale": "fill",
            }
        ],
    }


def _text_list(header_title: str, header_subtitle: str, event_source: str) -> Dict[str, Any]:
    return {
        "type": "AlexaTextList",
        "position": "absolute",
        "theme": "${viewport.theme}",
        "headerTitle": header_title,
        "headerSubtitle": header_subtitle,
        "headerDivider": True,
        "headerBackButtonAccessibilityLabel": "back",
        "headerBackgroundColor": "transparent",
        "backgroundColor": "transparent",
        "backgroundScale": "best-fill",
        "backgroundAlign": "center",
        # touch sends [node id, 1-based ordinal] back as a UserEvent
        "primaryAction": {"type": "SendEvent", "arguments": [event_source, "${ordinal}"]},
        "listItems": "${textListData.items}",
    }


# ----------------------------
# Documents
# ----------------------------
def default_screen_document() -> Dict[str, Any]:
    """Shown when nothing else uses the screen, so stale UI is not left behind."""
    headline = {
        "type": "AlexaHeadline",
        "headerBackButton": False,
        "headerTitle": "Fruit Shop",
        "headerDivider": True,
        "headerBackButtonAccessibilityLabel": "back",
        "headerBackgroundColor": "transparent",
        "primaryText": "",
        "secondaryText": "${data.prompt}",
        "backgroundColor": "transparent",
        "backgroundScale": "best-fill",
        "backgroundAlign": "center",
    }
    return _base_document("data", [headline])


def product_list_document() -> Dict[str, Any]:
    lst = _text_list("${textListData.headerTitle}", "${textListData.headerSubtitle}", "${textListData.controlId}")
    return _base_document("textListData", [lst, _icon(LIST_ICON_URL)])


def cart_list_document(control_id: str) -> Dict[str, Any]:
    lst = _text_list("${textListData.headerTitle}", "${textListData.headerSubtitle}", control_id)
    doc = _base_document("textListData", [lst, _icon(CART_ICON_URL)])
    doc["layouts"] = {}
    return doc


# ----------------------------
# Datasources
# ----------------------------
def default_screen_datasource(prompt: str) -> Dict[str, Any]:
    return {"data": {"prompt": prompt}}


def text_list_datasource(
    title: str,
    subtitle: str,
    lines: List[str],
    control_id: str = "",
) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "headerTitle": title,
        "headerSubtitle": subtitle,
        "items": [{"primaryText": ln} for ln in lines],
    }
    if control_id:
        data["controlId"] = control_id
    return {"textListData": data}
