import pytest

from transitkit.datasource import StringDataSource
from transitkit.openstreetmap import INVALID_NODE_ID, OpenStreetMap
from transitkit.xmlreader import XMLReader

SAMPLE = """<?xml version="1.0" encoding="UTF-8"?>
<osm version="0.6">
  <node id="62209104" lat="38.535052" lon="-121.7408606"/>
  <node id="62208369" lat="38.5178523" lon="-121.7712408"/>
  <node id="62224641" lat="38.5" lon="-121.7">
    <tag k="ref" v="71"/>
    <tag k="highway" v="motorway_junction"/>
  </node>
  <way id="10">
    <nd ref="62208369"/>
    <nd ref="62209104"/>
    <tag k="name" v="Russell Boulevard"/>
  </way>
  <way id="5">
    <nd ref="62224641"/>
  </way>
</osm>
"""


def make_map(text=SAMPLE):
    return OpenStreetMap(XMLReader(StringDataSource(text)))


def test_counts():
    osm = make_map()
    assert osm.node_count() == 3
    assert osm.way_count() == 2


def test_node_by_index_is_in_id_order():
    osm = make_map()
    ids = [osm.node_by_index(i).id for i in range(osm.node_count())]
    assert ids == sorted(ids)
    assert ids[0] == 62208369
    assert osm.node_by_index(3) is None


def test_node_by_id_location():
    osm = make_map()
    node = osm.node_by_id(62209104)
    assert node.id == 62209104
    assert node.location[0] == pytest.approx(38.535052)
    assert node.location[1] == pytest.approx(-121.7408606)
    assert osm.node_by_id(9999999999) is None


def test_node_attributes():
    node = make_map().node_by_id(62224641)
    assert node.has_attribute("highway")
    assert node.has_attribute("ref")
    assert not node.has_attribute("name")
    assert node.get_attribute("highway") == "motorway_junction"
    assert node.get_attribute("ref") == "71"
    assert node.get_attribute("name") == ""
    assert node.attribute_count() == 2


def test_attribute_keys_sorted_and_out_of_range():
    node = make_map().node_by_id(62224641)
    keys = [node.get_attribute_key(i) for i in range(node.attribute_count())]
    assert keys == sorted(["ref", "highway"])
    assert node.get_attribute_key(2) == ""


def test_self_closing_node_has_no_attributes():
    node = make_map().node_by_id(62208369)
    assert node.attribute_count() == 0


def test_way_by_index_is_document_order():
    osm = make_map()
    assert osm.way_by_index(0).id == 10
    assert osm.way_by_index(1).id == 5
    assert osm.way_by_index(2) is None


def test_way_nodes_and_attributes():
    way = make_map().way_by_id(10)
    assert way.node_count() == 2
    assert way.get_node_id(0) == 62208369
    assert way.get_node_id(1) == 62209104
    assert way.get_node_id(2) == INVALID_NODE_ID
    assert way.get_attribute("name") == "Russell Boulevard"
    assert way.get_attribute_key(0) == "name"
    assert way.get_attribute_key(1) == ""
    assert way.has_attribute("name")


def test_way_by_id_missing():
    assert make_map().way_by_id(42) is None


def test_way_nodes_reference_known_nodes():
    osm = make_map()
    resolved = []
    for index in range(osm.way_count()):
        way = osm.way_by_index(index)
        for position in range(way.node_count()):
            node_id = way.get_node_id(position)
            resolved.append(osm.node_by_id(node_id).id)
    assert resolved == [62208369, 62209104, 62224641]


def test_empty_document():
    osm = make_map("<osm></osm>")
    assert osm.node_count() == 0
    assert osm.way_count() == 0
    assert osm.node_by_index(0) is None


def test_missing_node_id_raises():
    with pytest.raises(ValueError):
        make_map('<osm><node lat="1.0" lon="2.0"/></osm>')


def test_bad_latitude_raises():
    with pytest.raises(ValueError):
        make_map('<osm><node id="1" lat="north" lon="2.0"/></osm>')


def test_duplicate_node_id_keeps_last():
    osm = make_map(
        '<osm><node id="7" lat="1.0" lon="2.0"/><node id="7" lat="3.0" lon="4.0"/></osm>'
    )
    assert osm.node_count() == 1
    assert osm.node_by_id(7).location == (3.0, 4.0)