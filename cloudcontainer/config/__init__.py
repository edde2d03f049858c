_config = {
    "blob.endpoint_format": "https://{account_name}.blob.core.windows.net",
    "blob.user_agent": "cloudcontainer-adapter",
}


def get_config():
    return _config


__all__ = ["get_config"]
