"""
Pytest configuration and shared fixtures
"""

import pytest
import os
import tempfile
import shutil


@pytest.fixture
def temp_dir():
    """Create temporary directory for test files"""
    dirpath = tempfile.mkdtemp()
    yield dirpath
    shutil.rmtree(dirpath)


@pytest.fixture
def sample_texts():
    """Small corpus with overlapping vocabulary, punctuation and mixed case"""
    return [
        "The quick brown fox jumps over the lazy dog.",
        "The dog was really lazy!",
        "A fox, a dog, and 42 bananas; Quick-Quick.",
        "Zebras sleep all day.",
    ]


@pytest.fixture
def make_files(temp_dir):
    """Factory writing text files into temp_dir, returns their paths"""
    def _make(texts, prefix='in'):
        paths = []
        for i, text in enumerate(texts):
            path = os.path.join(temp_dir, f'{prefix}{i}.txt')
            with open(path, 'w') as f:
                f.write(text)
            paths.append(path)
        return paths
    return _make


@pytest.fixture
def make_manifest(temp_dir):
    """Factory writing a manifest (count, then one path per line)"""
    def _make(paths, name='manifest.txt'):
        manifest = os.path.join(temp_dir, name)
        with open(manifest, 'w') as f:
            f.write(f"{len(paths)}\n")
            for path in paths:
                f.write(f"{path}\n")
        return manifest
    return _make


@pytest.fixture
def output_dir(temp_dir):
    """Directory for letter artifacts"""
    path = os.path.join(temp_dir, 'output')
    os.makedirs(path)
    return path


def read_artifacts(output_dir):
    """Read a.txt .. z.txt into {letter: [lines]}; missing or non-regular files map to None"""
    artifacts = {}
    for code in range(ord('a'), ord('z') + 1):
        letter = chr(code)
        path = os.path.join(output_dir, f'{letter}.txt')
        if not os.path.isfile(path):
            artifacts[letter] = None
            continue
        with open(path) as f:
            artifacts[letter] = f.read().splitlines()
    return artifacts


def parse_line(line):
    """Split 'word:[1 2 3]' into ('word', [1, 2, 3])"""
    word, ids = line.split(':', 1)
    ids = ids.strip('[]')
    return word, [int(i) for i in ids.split()] if ids else []


@pytest.fixture
def artifacts():
    """Reader for the letter artifacts of an output directory"""
    return read_artifacts


@pytest.fixture
def index_from_artifacts():
    """Collapse an output directory into {word: [ids]}"""
    def _collect(output_dir):
        index = {}
        for lines in read_artifacts(output_dir).values():
            for line in lines or []:
                word, ids = parse_line(line)
                assert word not in index, f"{word} written twice"
                index[word] = ids
        return index
    return _collect
