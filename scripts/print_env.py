import os
import sys
import importlib.util
from importlib import metadata

# Allow running from anywhere inside the repo
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.spelling.config import get_language, get_words_path

print('python executable:', sys.executable)

for dist in ('numpy', 'pyspellchecker', 'flask', 'flask-cors'):
    try:
        print(f'{dist} version:', metadata.version(dist))
    except metadata.PackageNotFoundError:
        print(f'{dist}: not installed')

spec = importlib.util.find_spec('spellchecker')
print('importlib.find_spec("spellchecker"):', spec)

words_path = get_words_path()
print('dictionary path:', words_path)
if os.path.isfile(words_path):
    with open(words_path, 'r', encoding='utf-8', errors='replace') as f:
        print('dictionary lines:', sum(1 for _ in f))
else:
    print('dictionary path does not exist')

print('bundled language override:', get_language())
