"""
Static English lexicon for the default part-of-speech tagger.

Identifier descriptions are short, technical, and mostly imperative
("get user info", "max retry count"), so a closed word list plus a few
suffix rules covers them well enough without a statistical model.
"""

# Verbs seen at the start of function names
VERBS = frozenset({
    "add", "apply", "assign", "authenticate", "authorize", "bind", "build",
    "calculate", "call", "cancel", "change", "check", "clean", "clear",
    "click", "clone", "close", "collect", "compare", "compile", "compute",
    "configure", "confirm", "connect", "convert", "copy", "create", "debug",
    "decode", "decrypt", "delete", "deploy", "destroy", "detect", "disable",
    "dispatch", "display", "do", "download", "drag", "drop", "edit", "emit",
    "enable", "encode", "encrypt", "ensure", "execute", "expand", "export",
    "extract", "fetch", "filter", "find", "flush", "follow", "format",
    "generate", "get", "handle", "hide", "import", "init", "initialize",
    "insert", "install", "invoke", "join", "load", "lock", "login", "logout",
    "make", "map", "mark", "merge", "migrate", "modify", "mount", "move",
    "navigate", "normalize", "notify", "observe", "open", "parse", "paste",
    "pause", "persist", "play", "poll", "post", "prefetch", "prepare",
    "print", "process", "publish", "pull", "push", "put", "query", "read",
    "receive", "redirect", "redo", "reduce", "refresh", "register", "reload",
    "remove", "render", "replace", "request", "reset", "resize", "resolve",
    "restore", "resume", "retrieve", "retry", "return", "run", "sanitize",
    "save", "scan", "schedule", "scroll", "search", "select", "send",
    "serialize", "set", "setup", "share", "show", "sign", "sort", "split",
    "start", "stop", "store", "submit", "subscribe", "switch", "sync",
    "test", "toggle", "track", "transform", "translate", "trigger", "trim",
    "undo", "unlock", "unmount", "unsubscribe", "update", "upload", "use",
    "validate", "verify", "view", "watch", "wrap", "write",
})

# Words that are verbs at the start of a description and nouns elsewhere:
# "search users" vs "user search", "count items" vs "retry count"
VERB_NOUN_AMBIGUOUS = frozenset({
    "cache", "change", "check", "click", "copy", "count", "display", "drag",
    "drop", "edit", "export", "filter", "follow", "format", "import", "lock",
    "login", "logout", "map", "mark", "order", "play", "poll", "post",
    "print", "process", "query", "register", "reload", "request", "reset",
    "retry", "return", "scan", "schedule", "scroll", "search", "setup",
    "share", "sign", "sort", "split", "start", "stop", "store", "switch",
    "sync", "test", "toggle", "track", "trigger", "undo", "update", "upload",
    "download", "use", "view", "watch", "wrap",
})

ADJECTIVES = frozenset({
    "active", "all", "async", "available", "basic", "big", "blank",
    "cached", "current", "custom", "dark", "default", "deleted", "dirty",
    "disabled", "draft", "dynamic", "empty", "enabled", "expired", "external",
    "fast", "final", "first", "full", "global", "hidden", "initial",
    "internal", "invalid", "large", "last", "latest", "light", "local",
    "loading", "locked", "main", "max", "maximum", "min", "minimum",
    "mobile", "new", "next", "old", "online", "offline", "open", "optional",
    "pending", "previous", "primary", "private", "public", "raw", "readonly",
    "ready", "recent", "remote", "required", "secondary", "selected",
    "short", "simple", "small", "static", "total", "temporary", "top",
    "unread", "valid", "visible",
})

# Function words, tagged as such and never turned into name parts
DETERMINERS = frozenset({"a", "an", "the", "this", "that", "these", "those", "each", "every", "some", "any"})
PREPOSITIONS = frozenset({
    "at", "by", "for", "from", "in", "into", "of", "on", "onto", "over",
    "to", "under", "via", "with", "within", "without", "about", "after",
    "before", "between", "per",
})
CONJUNCTIONS = frozenset({"and", "or", "but", "nor", "if", "when", "while", "then", "so"})
PRONOUNS = frozenset({"i", "me", "my", "we", "our", "you", "your", "it", "its", "they", "their", "them"})
AUXILIARIES = frozenset({"is", "are", "was", "were", "be", "been", "being", "can", "should", "will", "would", "must", "may", "might", "not"})

# Words that describe the request itself rather than the thing being named
META_WORDS = frozenset({"function", "method", "variable", "const", "name", "naming", "identifier"})

ADJECTIVE_SUFFIXES = ("able", "ible", "ive", "ful", "ous", "less", "ical")
VERB_SUFFIXES = ("ize", "ise", "ify")
