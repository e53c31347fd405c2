import pytest

SAMPLE = (
    "#EXTM3U\n"
    "#EXTINF:123,Song A\n"
    "a.mp3\n"
    "#EXTINF:456,Song B\n"
    "b.mp3\n"
)


@pytest.fixture
def sample_text():
    return SAMPLE


@pytest.fixture
def big_text():
    lines = ["#EXTM3U"]
    for i in range(20):
        lines.append(f"#EXTINF:{i},Artist{i} - Title{i}")
        lines.append(f"path/to/file{i}.mp3")
    return "\n".join(lines) + "\n"
