#!/usr/bin/env python3
"""
Java Doc Exporter (Python)
--------------------------
Indexes Java sources with Tree-sitter and writes their documentation model
as JSON:
- packages (with package-info.java docs)
- types that declare methods, their supertypes and Javadoc
- methods with return/parameter descriptions and annotations

USAGE EXAMPLES
--------------
# 1) Run against an in-code sample (no files needed):
python -m json_doclet.src.json_doclet.main

# 2) Run against a directory of .java files (recursive):
python -m json_doclet.src.json_doclet.main /path/to/java/project

The result is written to ./docs.json.

DEPENDENCIES
------------
    pip install tree-sitter tree-sitter-java loguru
"""

import sys

from json_doclet.src.json_doclet.compiler import compile_document
from json_doclet.src.json_doclet.config import DocletConfig
from json_doclet.src.json_doclet.indexer import JavaSymbolIndexer
from json_doclet.src.json_doclet.inputs.directory_scanning import index_directory
from json_doclet.src.json_doclet.outputs.output import write_docs

# --- Demo main ---------------------------------------------------------------

SAMPLE_PACKAGE_INFO = r"""
/** Example package. */
package com.acme.demo;
"""

SAMPLE_JAVA = r"""
package com.acme.demo;

import java.util.*;

/**
 * Keeps track of users.
 */
public class UserService implements AutoCloseable {
    private final UserRepository repo = new UserRepository();

    public UserService() {
        System.out.println("UserService constructed");
    }

    /**
     * Registers a new user.
     *
     * @param name the user's name
     * @return the created user
     */
    public User addUser(String name) {
        repo.save(name);
        return new User(name.trim());
    }

    @Override
    public void close() {
    }
}

class UserRepository {
    List<String> store = new ArrayList<>();
    public void save(String name) { store.add(name); }
    public List<String> findAll() { return store; }
}

class User {
    private final String name;
    public User(String name) { this.name = name; }
}
"""


def main():
    config = DocletConfig()
    indexer = JavaSymbolIndexer()

    # If a directory is given, index .java files in it; else use the samples
    if len(sys.argv) > 1:
        index_directory(indexer, sys.argv[1])
    else:
        indexer.index_source(SAMPLE_PACKAGE_INFO, "package-info.java")
        indexer.index_source(SAMPLE_JAVA, "<sample>")

    document = compile_document(indexer.symbol_model(), config)
    write_docs(document, config)


if __name__ == "__main__":
    main()
