import json

import pydantic


class TodoJSONEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, pydantic.BaseModel):
            return obj.model_dump()
        return super().default(obj)


def dumps(obj, **kwargs):
    return json.dumps(obj, cls=TodoJSONEncoder, **kwargs)


def serialize(obj):
    """
    Convert an object graph into JSON-compatible primitives.
    Plain scalars are returned untouched to skip the dumps/loads round trip.
    """
    if isinstance(obj, (str, int, float, bool, type(None))):
        return obj
    return json.loads(dumps(obj))
