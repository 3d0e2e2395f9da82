import os
from pathlib import Path
from typing import Dict


def _unquote(s: str) -> str:
    if len(s) >= 2 and s[0] == s[-1] and s[0] in ('"', "'"):
        return s[1:-1]
    return s


def parse_env_lines(text: str) -> Dict[str, str]:
    envs = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        line = line.removeprefix('export ')
        if '=' not in line:
            continue
        k, v = (part.strip() for part in line.split('=', 1))
        if k:
            envs[k] = _unquote(v)
    return envs


def load_env_file(env_file_path) -> Dict[str, str]:
    '''load KEY=VALUE lines of a dotenv style file into os.environ'''
    envs = parse_env_lines(Path(env_file_path).read_text(encoding='utf-8'))
    os.environ.update(envs)
    return envs
