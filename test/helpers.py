import json

import requests


def make_response(status_code=200, body=b"", url="http://localhost", reason="OK"):
    if isinstance(body, (dict, list)):
        body = json.dumps(body).encode("utf-8")
    elif isinstance(body, str):
        body = body.encode("utf-8")
    r = requests.Response()
    r.status_code = status_code
    r._content = body
    r.url = url
    r.reason = reason
    r.encoding = "utf-8"
    return r
