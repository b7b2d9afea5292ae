from getabonus.infrastructure.adapters.site_api_adapter import SiteApiAdapter

__all__ = ["SiteApiAdapter"]
