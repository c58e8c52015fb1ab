import os
import json


def get_data(data_name):
    this_file = os.path.abspath(__file__)
    this_dir = os.path.dirname(this_file)
    data_file = os.path.join(this_dir, data_name)
    with open(data_file) as fp:
        return json.load(fp)
