from importlib import resources

class InflectionDataSource:
    @staticmethod
    def yaml_path():
        """ Default singular and plural rules """
        return resources.files('wordkit.data').joinpath('inflections.yaml')
