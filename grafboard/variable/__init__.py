"""Templated dashboard variables: constant, custom, datasource, interval and query."""