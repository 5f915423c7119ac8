"""pytest configuration and fixtures for html-formgen tests."""

from html.parser import HTMLParser

import pytest


class InputCollector(HTMLParser):
    """Collects the attributes of every <input> element in a fragment."""

    def __init__(self):
        super().__init__()
        self.inputs = []

    def handle_starttag(self, tag, attrs):
        if tag == "input":
            self.inputs.append(attrs)


@pytest.fixture(autouse=True)
def reset_form_state():
    """Restore the default configuration and forget cached descriptors."""
    yield
    from html_formgen.protocols import set_form_config
    from html_formgen.forms.record_descriptor import clear_descriptor_cache

    set_form_config(None)
    clear_descriptor_cache()


@pytest.fixture
def parse_inputs():
    """Parse an HTML fragment and return the attribute lists of its inputs."""
    def parse(fragment):
        collector = InputCollector()
        collector.feed(str(fragment))
        collector.close()
        return collector.inputs
    return parse
