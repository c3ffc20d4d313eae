def pytest_configure(config):
    config.addinivalue_line('markers', 'unit: fast, isolated unit tests')
    config.addinivalue_line('markers', 'property: hypothesis-driven tests')
