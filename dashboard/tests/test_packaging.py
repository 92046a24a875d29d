import re
from pathlib import Path

from django.conf import settings


def test_package_readme_is_the_project_readme():
    pyproject = (Path(settings.BASE_DIR) / 'pyproject.toml').read_text(encoding='utf-8')
    readme = re.search(r'^readme\s*=\s*"([^"]+)"', pyproject, re.MULTILINE).group(1)
    assert readme == 'README.md'
    assert (Path(settings.BASE_DIR) / readme).exists()
