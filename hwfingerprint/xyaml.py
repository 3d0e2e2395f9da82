from io import StringIO

from ruamel.yaml import YAML


def _to_plain(obj):
    # ruamel only represents builtin containers
    if isinstance(obj, dict) or hasattr(obj, 'items'):
        return {str(k): _to_plain(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_to_plain(v) for v in obj]
    return obj


def yaml_dump(obj, file_handler=None, **kwargs):
    yaml = YAML()
    yaml.allow_unicode = True
    yaml.default_flow_style = False

    if file_handler is None:
        stream = StringIO()
        yaml.dump(_to_plain(obj), stream, **kwargs)
        return stream.getvalue()
    yaml.dump(_to_plain(obj), file_handler, **kwargs)
