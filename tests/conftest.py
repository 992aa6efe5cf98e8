import pytest

from colordle.core.models import DatabaseEntry


@pytest.fixture
def primaries():
    return [
        DatabaseEntry('Red', '#FF0000'),
        DatabaseEntry('Black', '#000000'),
        DatabaseEntry('Blue', '#0000FF'),
    ]


@pytest.fixture
def mock_colors():
    return [
        DatabaseEntry('Red', '#FF0000'),
        DatabaseEntry('Green', '#00FF00'),
        DatabaseEntry('Blue', '#0000FF'),
        DatabaseEntry('Cyan', '#00FFFF'),
        DatabaseEntry('Magenta', '#FF00FF'),
        DatabaseEntry('Yellow', '#FFFF00'),
        DatabaseEntry('White', '#FFFFFF'),
        DatabaseEntry('Black', '#000000'),
    ]


@pytest.fixture
def csv_database(tmp_path):
    path = tmp_path / 'colornames.csv'
    path.write_text(
        'name,hex\n'
        'Red,#ff0000\n'
        'Teal,#008080\n'
        'Blue,#0000FF\n'
        'Broken,#12345\n'
        '\n'
        'Navy,#000080\n',
        encoding='utf-8',
    )
    return path
