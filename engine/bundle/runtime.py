"""Loader runtime embedded between vendor code and app modules.

Registry and cache live in the closure, so each evaluated bundle carries its
own. ``require`` and ``global`` are attached to the host global object
(``window`` in a browser). Name resolution matches ``engine.paths.resolve``.
"""

LOADER_RUNTIME = """(function(root) {
var registered = {},
	cache = {};

var expand = function(dir, name) {
	if (!/^\\.\\.?(\\/|$)/.test(name)) {
		return name;
	}
	var results = [], parts = [dir, name].join('/').split('/'), part;
	for (var i = 0, length = parts.length; i < length; i++) {
		part = parts[i];
		if (part === '..') {
			results.pop();
		} else if (part !== '.' && part !== '') {
			results.push(part);
		}
	}
	return results.join('/');
};

var dirname = function(path) {
	return path.split('/').slice(0, -1).join('/');
};

var localRequire = function(path) {
	return function(name) {
		return require(expand(dirname(path), name));
	};
};

var instantiate = function(name) {
	if (!Object.prototype.hasOwnProperty.call(registered, name)) {
		throw new Error('module "' + name + '" not found');
	}
	var m = { id: name, exports: {} };
	cache[name] = m;
	try {
		registered[name](m.exports, localRequire(name), m);
	} catch (e) {
		delete cache[name];
		throw e;
	}
	return m;
};

var require = function(name) {
	var m = Object.prototype.hasOwnProperty.call(cache, name) ? cache[name] : instantiate(name);
	return m.exports;
};

require.register = function(name, definition) {
	registered[name] = definition;
};

root.global = root;
root.require = require;

})(typeof window !== 'undefined' ? window : this);
"""
