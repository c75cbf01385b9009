# transitkit

Small building blocks for reading transit and map data from text.

- `transitkit.datasource`: the `DataSource` interface and `StringDataSource`,
  which hands out the characters of a string through `get()`, `peek()`,
  `read(count)` and `end()`.
- `transitkit.datasink`: the `DataSink` interface and `StringDataSink`, which
  collects everything passed to `put(ch)` and `write(data)`; the collected
  text is the `string` property.
- `transitkit.strutils`: string helpers `slice_text`, `capitalize`, `upper`,
  `lower`, `lstrip`, `rstrip`, `strip`, `center`, `ljust`, `rjust`,
  `replace`, `split`, `join`, `expand_tabs` and `edit_distance`
  (Levenshtein distance, optionally ignoring case).
- `transitkit.dsv`: `DSVReader` and `DSVWriter` for delimiter-separated
  values with double-quote escaping.
- `transitkit.xmlentity`: `XMLEntity` and `EntityType` (start, end,
  character data and complete elements).
- `transitkit.xmlreader`: `XMLReader`, which turns a data source into a
  stream of entities.
- `transitkit.xmlwriter`: `XMLWriter`, which writes entities to a data sink.
- `transitkit.openstreetmap`: `OpenStreetMap`, which loads `Node` and `Way`
  objects from an OSM XML document.
- `transitkit.bussystem`: `CSVBusSystem`, which loads `Stop` and `Route`
  objects from CSV data.

## Installing

```
pip install .
```

## Reading delimited data

```python
from transitkit.datasource import StringDataSource
from transitkit.dsv import DSVReader

reader = DSVReader(StringDataSource('a,b,c\n"x,y",2,3\n'), ",")
for row in reader:
    print(row)          # ['a', 'b', 'c'], then ['x,y', '2', '3']
```

`read_row()` returns the next row as a list of strings, or `None` once the
source is used up. Inside double quotes the delimiter and newlines are taken
literally, and `""` stands for one quote.

## Writing delimited data

```python
from transitkit.datasink import StringDataSink
from transitkit.dsv import DSVWriter

sink = StringDataSink()
writer = DSVWriter(sink, ",", False)
writer.write_row(["name", "has,comma"])
print(sink.string)   # name,"has,comma"  followed by a newline
```

A value is quoted when it holds the delimiter, a double quote or a newline,
or always when `quote_all` is true.

## Reading and writing XML

```python
from transitkit.datasink import StringDataSink
from transitkit.datasource import StringDataSource
from transitkit.xmlentity import EntityType, XMLEntity
from transitkit.xmlreader import XMLReader
from transitkit.xmlwriter import XMLWriter

reader = XMLReader(StringDataSource('<user name="Ann" city="Davis"/>'))
entity = reader.read_entity()
print(entity.type, entity.name_data, entity.attribute_value("city"))
# EntityType.COMPLETE_ELEMENT user Davis

sink = StringDataSink()
writer = XMLWriter(sink)
writer.write_entity(XMLEntity(EntityType.START_ELEMENT, "list"))
writer.write_entity(XMLEntity(EntityType.COMPLETE_ELEMENT, "item", [("id", "1")]))
writer.write_entity(XMLEntity(EntityType.CHAR_DATA, "a < b"))
writer.flush()
print(sink.string)   # <list><item id="1"/>a &lt; b</list>
```

The reader reports a start element followed at once by its end element as
one complete element and drops whitespace-only character data;
`read_entity(skip_cdata=True)` returns only elements. The writer escapes
character data but writes attribute values as given, raises `ValueError`
for an end element that does not close the innermost open element, and
`flush()` closes every element still open.

## Loading a map and a bus system

```python
from transitkit.datasource import StringDataSource
from transitkit.dsv import DSVReader
from transitkit.xmlreader import XMLReader
from transitkit.openstreetmap import OpenStreetMap
from transitkit.bussystem import CSVBusSystem

with open("map.osm", encoding="utf-8") as fh:
    street_map = OpenStreetMap(XMLReader(StringDataSource(fh.read())))
print(street_map.node_count(), street_map.way_count())

with open("stops.csv", encoding="utf-8") as stops, open("routes.csv", encoding="utf-8") as routes:
    buses = CSVBusSystem(
        DSVReader(StringDataSource(stops.read()), ","),
        DSVReader(StringDataSource(routes.read()), ","),
    )
route = buses.route_by_name("A")
if route is not None:
    print(route.stop_count(), route.get_stop_id(0))
```

Map nodes are indexed in ascending id order and ways in document order;
a node or way with a missing or malformed id or coordinate raises
`ValueError`. Stop rows are `stop_id,node_id` (rows that are not two ids,
such as a header, are skipped); route rows are `name,stop_id,...`, and rows
naming a route already seen extend it.

Lookups by index, id or name return `None` when nothing matches.
`Way.get_node_id` and `Route.get_stop_id` return `INVALID_NODE_ID` and
`INVALID_STOP_ID` for an index out of range.

## What it does not do

transitkit is a library only: it has no command-line tool, does not compute
routes or paths between stops, and reads its input from strings you supply
rather than opening files itself.

## Running the tests

```
pip install .[test]
pytest
```