# fakeprinter

A simulated 3D printer. It reads a print job from a CSV file with one row per
layer. For each layer it creates a directory and writes the layer's settings
through a pluggable converter (JSON or YAML-style text). It then fetches the
layer's image. At the end it records a summary of the job.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running a job

```
fakeprinter [CSV_FILE] [--directory DIR] [--job NAME]
```

- `CSV_FILE` is the job file, relative to the current directory. It defaults
  to `fl_coding_challenge_v1.csv`.
- `--directory` names the output directory, relative to the current
  directory. It defaults to `Printing`.
- `--job` is the job name passed to the printer. It defaults to `Job1`.

The command runs in automatic mode with the JSON converter and logs its
progress to standard error. It writes:

- `<DIR>/layer_<n>/layer_<n>.json`: the settings of layer `n`, as indented
  JSON with sorted keys
- `<DIR>/layer_<n>/<file_name>`: the image downloaded for that layer
- `summary.json`: the number of layers read, failed layers and printed layers

## The CSV file

The first line holds the column names, separated by commas. Quoting is not
supported. The recognised columns are:

`Layer Number`, `Layer Height`, `Material Type`, `Extrusion Temperature`,
`Print Speed`, `Layer Adhesion Quality`, `Infill Density`, `Infill Pattern`,
`Shell Thickness`, `Overhang Angle`, `Retraction Settings`,
`Cooling Fan Speed`, `Z-Offset Adjustment`, `Print Bed Temperature`,
`Layer Time`, `Layer Error`, `file_name` and `image url`.

Other columns are ignored. The file is expected to have CRLF line endings:

- `image url` is recognised only as the last column, where its name carries
  the line's trailing carriage return.
- The image URL itself loses its last character, the carriage return, before
  it is downloaded.

A row is skipped if its number of cells differs from the header, or if a
numeric cell does not start with a number. Numeric cells are read from their
leading number, so `210C` reads as `210`.

`Layer Error` takes `SUCCESS`, `TEMP_OUT_OF_RANGE` or `TIMED_OUT`. Any other
value leaves the layer marked as successful.

## Using it from Python

```python
from fakeprinter.csv_reader import CSVReader, row_to_layer, split_csv_line
from fakeprinter.exporter import FileWriter, JsonPlugin, YamlPlugin
from fakeprinter.layer import CompositeLayers, Layer, LayerError
from fakeprinter.modes import AutomaticMode, SupervisedMode
from fakeprinter.printer import FakePrinter, Summary

layer = row_to_layer(
    split_csv_line("Material Type,Layer Number,Layer Error"),
    split_csv_line("PLA,5,SUCCESS"),
)
print(JsonPlugin().convert(layer))
print(YamlPlugin().convert(layer))
```

### Reading layers

- `split_csv_line` splits a line on commas and drops a trailing empty cell.
- `row_to_layer` builds a `Layer` dataclass from a header and a row. It
  returns `None` when the row is malformed.
- `CSVReader(filename)` reads a whole file. Its `composite_layer` property
  returns a `CompositeLayers` collection, which supports `len` and
  iteration, and has `add_layer`, `is_empty`, `check_valid_layer` and
  `layers`.

### Exporting layers

- `layer_to_dict` turns a layer into a plain dictionary, with the error as
  an integer.
- `JsonPlugin` and `YamlPlugin` are `PluginConverter` subclasses.
- `Exporter` applies a plugin to a layer.
- `FileWriter(directory, filename, plugin, file_extension=".json", mode="w")`
  is a context manager that writes a string as is, or a layer through its
  plugin, to `<directory>/<filename><extension>`.

### Downloading images

`FileDownloader.start_download(url, folder_name, filename)` fetches the URL
without its last character and saves the response body to
`folder_name/filename`. It uses the standard library's `urllib`.

- It returns `True` when a response arrived, including HTTP error
  responses.
- It returns `False` when the network request failed.
- It raises `OSError` if the output file cannot be opened.

### Running a print

`FakePrinter(name, plugin, csv_file_name, directory_name, mode,
base_path=None, downloader=None)` ties everything together. `base_path`
defaults to the current directory.

`print_job(filename)` processes every layer. It writes `summary.json` in the
base path and returns the `Summary`.

The mode decides what happens between layers:

- `AutomaticMode` prints a message and carries on past failed layers.
- `SupervisedMode` waits for an empty line before each layer. When a layer
  has failed, it asks `[y/n]` whether to stop. Its input and output streams
  default to standard input and output.

## What it does not do

The package does not drive a physical printer, and it has no graphical
interface. A "print" consists only of:

- writing each layer's settings to files
- downloading the layer images
- writing the summary

The `fakeprinter` command always runs in automatic mode. Supervised mode and
the YAML converter are available only from Python.