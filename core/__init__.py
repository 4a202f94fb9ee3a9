"""Order service core: domain, application, data and infrastructure layers."""
