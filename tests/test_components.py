import base64

from ui.components.table import build_frame
from ui.components.base import skill_chips, status_badge, status_label
from utils.images import to_data_url


def test_build_frame_projects_columns_in_order():
    records = [
        {'id': '1', 'name': 'Cara', 'skills': ['Python', 'SQL'], 'status': 'new'},
        {'id': '2', 'name': 'Dan', 'skills': [], 'status': 'hired'},
    ]
    columns = [
        ('name', 'Name', None),
        ('skills', 'Skills', None),
        ('status', 'Status', lambda r: status_label(r['status'])),
    ]
    df = build_frame(records, columns)
    assert list(df.columns) == ['Name', 'Skills', 'Status']
    assert df.iloc[0].tolist() == ['Cara', 'Python, SQL', 'New']
    assert df.iloc[1]['Status'] == 'Hired'


def test_build_frame_empty_keeps_headers():
    df = build_frame([], [('name', 'Name', None)])
    assert df.empty
    assert list(df.columns) == ['Name']


def test_status_badge_colors_known_statuses():
    assert 'Active' in status_badge('active')
    assert '#059669' in status_badge('active')
    assert '#6B7280' in status_badge('archived')


def test_to_data_url():
    url = to_data_url(b'abc', 'photo.png')
    assert url == 'data:image/png;base64,' + base64.b64encode(b'abc').decode('ascii')
    assert to_data_url(b'x', 'blob', mime='image/gif').startswith('data:image/gif;base64,')


def test_user_text_is_escaped_in_html_snippets():
    chips = skill_chips(['<script>alert(1)</script>', 'SQL'])
    assert '<script>' not in chips
    assert '&lt;script&gt;' in chips
    assert '>SQL<' in chips
    assert '<img' not in status_badge('<img src=x>')
