import io


def photo_part(data: bytes = b"\x89PNG fake image bytes", name: str = "widget.png"):
    return (io.BytesIO(data), name)


def register(client, **fields):
    return client.post("/register", data=fields, content_type="multipart/form-data")
