"""
测试数据模型
"""
from __future__ import annotations

from pathlib import Path

from bs4 import BeautifulSoup

from gvfilter.models import Fragment, RenderRequest, RenderResult


def _tag(markup: str):
    return BeautifulSoup(markup, "html.parser").find("graphviz")


def test_fragment_defaults():
    fragment = Fragment.from_tag(_tag("<graphviz>\n  digraph g { a -> b }\n\n</graphviz>"))

    assert fragment.source == "digraph g { a -> b }"
    assert fragment.path is None
    assert fragment.cmd == "dot"
    assert fragment.type == "png"
    assert fragment.attributes == {}


def test_fragment_attributes():
    fragment = Fragment.from_tag(_tag(
        '<graphviz path="images" cmd="circo" type="jpeg" id="f" class="a b" title="ignored">'
        "graph g { a -- b }</graphviz>"
    ))

    assert fragment.path == "images"
    assert fragment.cmd == "circo"
    assert fragment.type == "jpeg"
    assert list(fragment.attributes.items()) == [("class", "a b"), ("id", "f")]


def test_fragment_source_is_not_escaped():
    fragment = Fragment.from_tag(_tag('<graphviz>digraph g { a -> b [label="x&y"] }</graphviz>'))

    assert fragment.source == 'digraph g { a -> b [label="x&y"] }'


def test_render_result_markup():
    request = RenderRequest(name="g", image_filename="g.png", output_file=Path("out/g.png"))

    plain = RenderResult(request=request, img_tag='<img src="g.png" />')
    with_map = RenderResult(request=request, img_tag='<img src="g.png" usemap="g" />', map_markup="<map></map>\n")

    assert plain.markup == '<img src="g.png" />'
    assert with_map.markup == '<img src="g.png" usemap="g" />\n<map></map>\n'
