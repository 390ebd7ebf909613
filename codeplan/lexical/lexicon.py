"""Fixed word tables used by the tagger and entity extractor."""

from __future__ import annotations

# Technology names matched case-insensitively against the raw request.
TECHNOLOGIES = frozenset({
    # Languages
    "javascript", "typescript", "python", "java", "c#", "ruby", "golang",
    "rust", "kotlin", "swift", "php", "c++", "scala", "elixir", "haskell",
    "dart", "lua", "perl", "sql", "bash", "html", "css",
    # Frameworks
    "react", "angular", "vue", "express", "django", "spring", "flask",
    "fastapi", "next.js", "nuxt", "svelte", "rails", "ruby on rails",
    "laravel", "spring boot", "nestjs", "electron", "flutter", "react native",
    "tailwind", "bootstrap", "jquery", "pytorch", "tensorflow", "pandas",
    "numpy", "celery",
    # Platforms
    "node", "node.js", "browser", "web", "mobile", "desktop", "server",
    "ios", "android", "linux", "windows", "macos", "serverless",
    # Datastores
    "postgres", "postgresql", "mysql", "sqlite", "mongodb", "redis",
    "elasticsearch", "dynamodb", "cassandra", "kafka", "rabbitmq",
    # Infrastructure and services
    "docker", "kubernetes", "terraform", "aws", "azure", "gcp", "lambda",
    "heroku", "vercel", "nginx", "github actions", "jenkins",
    # Protocols, formats and auth
    "graphql", "grpc", "websocket", "websockets", "json", "yaml", "xml",
    "oauth", "oauth2", "jwt", "stripe", "webpack", "vite", "jest", "pytest",
    "mocha", "cypress",
    # Compliance regimes
    "pci", "pci-dss", "gdpr", "hipaa", "soc2",
})

# Matched with exact casing only; lower-case forms are ordinary words.
CASE_SENSITIVE_TECHNOLOGIES = frozenset({"REST", "SOAP", "Go"})

DETERMINERS = frozenset({
    "a", "an", "the", "this", "that", "these", "those", "every", "each",
    "some", "any", "all", "no", "another",
})
PREPOSITIONS = frozenset({
    "in", "on", "at", "with", "for", "from", "of", "by", "about", "into",
    "over", "under", "after", "before", "between", "through", "without",
    "via", "within", "across", "per", "like", "than", "as",
})
CONJUNCTIONS = frozenset({"and", "or", "but", "nor", "yet", "so"})
PRONOUNS = frozenset({
    "i", "you", "he", "she", "it", "we", "they", "me", "him", "her", "us", "them",
})
POSSESSIVES = frozenset({"my", "your", "our", "their", "its", "his"})
MODALS = frozenset({
    "must", "should", "can", "could", "will", "would", "may", "might", "shall",
})
WH_WORDS = frozenset({"which", "what", "who", "whom", "whose"})
WH_ADVERBS = frozenset({"when", "where", "how", "why"})
ADVERBS = frozenset({"not", "very", "also", "too", "only", "just", "quickly", "then"})

BE_FORMS = {
    "be": "VB", "is": "VBZ", "are": "VBP", "am": "VBP", "was": "VBD",
    "were": "VBD", "been": "VBN", "being": "VBG",
}
HAVE_FORMS = {"have": "VBP", "has": "VBZ", "had": "VBD"}

# Base verbs common in software requests.
VERBS = frozenset({
    "create", "build", "make", "write", "generate", "implement", "develop",
    "add", "design", "fix", "refactor", "optimize", "deploy", "use",
    "support", "handle", "need", "include", "provide", "return", "store",
    "read", "parse", "validate", "send", "fetch", "run", "get", "set",
    "update", "delete", "display", "show", "allow", "integrate", "convert",
    "calculate", "connect", "process", "sort", "filter", "render", "load",
    "save", "upload", "download", "encrypt", "authenticate", "authorize",
    "cache", "log", "monitor", "scale", "expose", "accept", "manage",
    "track", "notify", "schedule", "migrate", "document", "release",
})

ADJECTIVES = frozenset({
    "secure", "simple", "fast", "small", "large", "new", "good", "basic",
    "complex", "scalable", "robust", "efficient", "compliant", "private",
    "public", "personal", "sensitive", "critical", "important", "urgent",
    "optional", "experimental", "async", "concurrent", "parallel",
    "distributed", "real-time", "responsive", "reusable", "modern",
})

NUMBER_WORDS = frozenset({
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen", "twenty", "hundred",
    "thousand", "million",
})

NOUN_SUFFIXES = ("tion", "sion", "ment", "ness", "ity", "ance", "ence", "ship", "ism")
ADJECTIVE_SUFFIXES = ("able", "ible", "ous", "ful", "ive", "less", "ical")
