from jinja2 import Environment, select_autoescape

from eztag.html import Meta, Title
from eztag.jinja_ext import register


def _env() -> Environment:
    return register(Environment(autoescape=select_autoescape(default_for_string=True)))


def test_tag_filter_is_not_double_escaped():
    template = _env().from_string("<head>{{ meta|tag }}{{ title|tag }}</head>")
    output = template.render(meta=Meta.create_charset("UTF-8"), title=Title("A & B"))
    assert output == '<head><meta charset="UTF-8"><title>A&nbsp;&amp;&nbsp;B</title></head>'


def test_encode_filters():
    env = Environment(autoescape=False)
    register(env)
    template = env.from_string('<p title="{{ v|attr_encode }}">{{ v|body_encode }}</p>')
    assert template.render(v='x "y"') == '<p title="x &quot;y&quot;">x&nbsp;&quot;y&quot;</p>'
    assert env.from_string("{{ s|style_encode }}").render(s="a:b;") == '"a:b;"'
