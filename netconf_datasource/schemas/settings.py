from typing import Union

from pydantic import BaseModel, ConfigDict, ValidationError

from netconf_datasource.core.exceptions import DatasourceConfigError, PluginSettingsError

ALLOWED_SCHEMES = ("http://", "https://")


class PluginSettings(BaseModel):
    """Data source instance settings, as persisted by the config editor"""
    model_config = ConfigDict(frozen=True, extra="ignore")

    address: str = ""

    @property
    def base_url(self) -> str:
        return self.address.rstrip("/")


def load_plugin_settings(json_data: Union[str, bytes, dict, None]) -> PluginSettings:
    """
    Decode the persisted jsonData blob into PluginSettings.
    Only decoding is checked here, the address is validated when it is used.
    """
    try:
        if isinstance(json_data, (str, bytes, bytearray)):
            return PluginSettings.model_validate_json(json_data)
        return PluginSettings.model_validate(json_data)
    except ValidationError as e:
        raise PluginSettingsError(f"could not unmarshal PluginSettings json: {e}") from e


def validate_address(address: str) -> None:
    if not address:
        raise DatasourceConfigError("datasource address is not configured")
    if not address.startswith(ALLOWED_SCHEMES):
        raise DatasourceConfigError("datasource address must include http:// or https://")
