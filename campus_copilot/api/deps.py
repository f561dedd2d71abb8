# Role: Process-wide singletons shared by the routers. The data source is chosen from config:
# the campus REST API when CAMPUS_API_URL is set, otherwise the JSON seed file.

from __future__ import annotations

import campus_copilot.config as config
from campus_copilot.core.flow_controller import FlowController
from campus_copilot.tools.campus_data import HttpCampusData, JsonCampusData


def build_data_source():
    if config.CAMPUS_API_URL:
        return HttpCampusData(config.CAMPUS_API_URL, timeout=config.CAMPUS_API_TIMEOUT)
    return JsonCampusData.from_file(config.CAMPUS_DATA_FILE)


flow_controller = FlowController(data_source=build_data_source())
