from setuptools import setup, find_packages

setup(
    name='columnar-data-graph',
    version='1.0.0',
    description='Columnar, dictionary-encoded data graphs from attributed property graphs',
    packages=find_packages(include=[
        'datagraph_api', 'datagraph_api.*',
        'datagraph_core', 'datagraph_core.*',
        'data_source_plugin_json', 'data_source_plugin_json.*',
    ]),
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'datagraph.data_source': [
            'json = data_source_plugin_json.plugin:JsonDataSourcePlugin',
        ],
    },
    python_requires='>=3.10',
)
