"""Static entry document served at ``/`` and written as ``index.html``."""

INDEX_HTML = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8">
    <meta http-equiv="X-UA-Compatible" content="IE=edge,chrome=1">
    <meta name="viewport" content="width=device-width,initial-scale=1">
    <title></title>
    <link rel="stylesheet" href="index.css" >
  </head>
  <body>
    <script src="index.js"></script>
    <script>require("main")</script>
  </body>
</html>"""
