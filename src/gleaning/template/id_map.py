# SPDX-License-Identifier: MIT

from gleaning.model.id_map import IdMap, IdMapMapping


def get_id_map_mapping_template() -> IdMapMapping:
    return {"synthetic_to_real": {}, "real_to_synthetic": {}}


def get_id_map_template() -> IdMap:
    return {
        "projects": get_id_map_mapping_template(),
        "inspirations": get_id_map_mapping_template(),
    }
