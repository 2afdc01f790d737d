import pytest


class MockConfigurationManager:
    """Dict-backed stand-in for ConfigurationManager with the same dot-notation `get`."""
    def __init__(self, settings=None):
        self.settings = settings if settings is not None else {}

    def get(self, key, default=None):
        try:
            value = self.settings
            for k_part in key.split('.'):
                value = value[k_part]
            return value
        except (KeyError, TypeError):
            return default


@pytest.fixture
def mock_config():
    """Factory fixture: `mock_config({...})` returns a MockConfigurationManager."""
    return MockConfigurationManager


TIMEZONE_PAGE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>TIMEZONE</title></head>
<body>
<table class="properties">
    <tr>
        <th>Property</th>
        <th>Description</th>
    </tr>
    <tr>
        <td>Timezone</td>
        <td>Select a timezone.</td>
    </tr>
</table>
<table class="timezones">
    <tr>
        <th>Timezone</th>
        <th>DST</th>
    </tr>
    <tr>
        <td>America/New_York</td>
        <td>Yes</td>
    </tr>
    <tr>
        <td>Europe/Z&uuml;rich</td>
        <td>Yes&nbsp;(CET)</td>
    </tr>
</table>
</body>
</html>
"""


@pytest.fixture
def timezone_page():
    """A small copy of the documentation page: one unrelated table, one timezone table."""
    return TIMEZONE_PAGE
