import json

from stallrow.geometry import ViewportMetrics
from stallrow.layout.generator import generate_level
from stallrow.rng import ScriptedRandom

def test_level_dict_is_json_ready():
    rng = ScriptedRandom.of([1], [True, False, True, True, False])
    st = generate_level(ViewportMetrics(400, 200, 40), rng)
    d = json.loads(json.dumps(st.to_dict()))
    assert d["viewport"] == {"width": 400, "height": 200, "edgePadding": 40}
    assert [o["id"] for o in d["objects"]] == ["boundaryLeft", "unit_0"]
    assert d["objects"][0]["kind"] == "boundaryLeft"
    assert d["objects"][1]["attributes"] == {"category": True, "decorated": True, "kind": "large"}
    assert d["scaleFactor"] == st.scale_factor
