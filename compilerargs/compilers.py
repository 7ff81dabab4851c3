"""
Compiler argument sets: the options shared by every compiler front-end and
the JVM front-end's additions.

Option names are declared without their leading dash. Names starting with "X"
are advanced options, listed only by the advanced synopsis (-X).
"""
from .arguments import Choice, Field, Flag, Option, Variant
from .schema import ArgumentSet

PLUGIN_OPTION_FORMAT = "plugin:<pluginId>:<optionName>=<value>"


class Coroutines(Choice):
    """
    How declarations and use sites of the 'suspend' modifier are treated.
    """
    __key__ = "Xcoroutines"
    __descr__ = "Enable coroutines or report warnings or errors on declarations and use sites of 'suspend' modifier"

    ENABLE = "enable"
    WARN = "warn"
    ERROR = "error"


class CommonCompilerArguments(ArgumentSet, executable="kotlinc"):
    language_version = Option(
        "language-version",
        descr="Provide source compatibility with specified language version",
        metavar="<version>",
    )
    api_version = Option(
        "api-version",
        descr="Allow to use declarations only from the specified version of bundled libraries",
        metavar="<version>",
    )
    suppress_warnings = Flag("nowarn", descr="Generate no warnings")
    verbose = Flag("verbose", descr="Enable verbose logging output")
    version = Flag("version", descr="Display compiler version")
    help = Flag("help", "h", descr="Print a synopsis of standard options")
    extra_help = Flag("X", descr="Print a synopsis of advanced options")

    no_inline = Flag("Xno-inline", descr="Disable method inlining")
    repeat = Option("Xrepeat", descr="Repeat compilation (for performance analysis)", metavar="<count>")
    skip_metadata_version_check = Flag(
        "Xskip-metadata-version-check",
        descr="Load classes with bad metadata version anyway (incl. pre-release classes)",
    )
    allow_kotlin_package = Flag("Xallow-kotlin-package", descr="Allow compiling code in package 'kotlin'")
    plugin_classpaths = Option(
        "Xplugin",
        descr="Load plugins from the given classpath",
        metavar="<path>",
        multiple=True,
    )
    multi_platform = Flag("Xmulti-platform", descr="Enable experimental language support for multi-platform projects")
    no_check_impl = Flag("Xno-check-impl", descr="Do not check presence of 'impl' modifier in multi-platform projects")
    no_java_version_warning = Flag("Xskip-java-check", descr="Do not warn when running the compiler under Java 6 or 7")

    # One three-way setting; the variants keep the historical switch names.
    coroutines = Field(Coroutines.WARN)
    coroutines_warn = Variant(Coroutines.WARN, store="coroutines")
    coroutines_error = Variant(Coroutines.ERROR, store="coroutines")
    coroutines_enable = Variant(Coroutines.ENABLE, store="coroutines")

    plugin_options = Option("P", descr="Pass an option to a plugin", metavar=PLUGIN_OPTION_FORMAT, multiple=True)


class JvmCompilerArguments(CommonCompilerArguments, executable="kotlinc-jvm"):
    destination = Option("d", descr="Destination for generated class files", metavar="<directory|jar>")
    classpath = Option("classpath", "cp", descr="Paths where to find user class files", metavar="<path>")
    include_runtime = Flag("include-runtime", descr="Include Kotlin runtime in to resulting .jar")
    jdk_home = Option(
        "jdk-home",
        descr="Path to JDK home directory to include into classpath, if differs from default JAVA_HOME",
        metavar="<path>",
    )
    no_jdk = Flag("no-jdk", descr="Don't include Java runtime into classpath")
    no_stdlib = Flag("no-stdlib", descr="Don't include Kotlin runtime into classpath")
    no_reflect = Flag("no-reflect", descr="Don't include Kotlin reflection implementation into classpath")
    module = Option("module", descr="Path to the module file to compile", metavar="<path>")
    script = Flag("script", descr="Evaluate the script file")
    script_templates = Option(
        "script-templates",
        descr="Script definition template classes",
        metavar="<fully qualified class name[,]>",
        multiple=True,
    )
    kotlin_home = Option(
        "kotlin-home",
        descr="Path to Kotlin compiler home directory, used for runtime libraries discovery",
        metavar="<path>",
    )
    module_name = Option("module-name", descr="Module name")
    jvm_target = Option(
        "jvm-target",
        descr="Target version of the generated JVM bytecode (1.6 or 1.8), default is 1.6",
        metavar="<version>",
        default="1.6",
    )
    java_parameters = Flag("java-parameters", descr="Generate metadata for Java 1.8 reflection on method parameters")

    no_call_assertions = Flag(
        "Xno-call-assertions",
        descr="Don't generate not-null assertion after each invocation of method returning not-null",
    )
    no_param_assertions = Flag(
        "Xno-param-assertions",
        descr="Don't generate not-null assertions on parameters of methods accessible from Java",
    )
    no_optimize = Flag("Xno-optimize", descr="Disable optimizations")
    report_perf = Flag("Xreport-perf", descr="Report detailed performance statistics")
    inherit_multifile_parts = Flag(
        "Xmultifile-parts-inherit",
        descr="Compile multifile classes as a hierarchy of parts and facade",
    )
    skip_runtime_version_check = Flag(
        "Xskip-runtime-version-check",
        descr="Allow Kotlin runtime libraries of incompatible versions in the classpath",
    )
    declarations_output_path = Option(
        "Xdump-declarations-to",
        descr="Path to JSON file to dump Java to Kotlin declaration mappings",
        metavar="<path>",
    )
    single_module = Flag(
        "Xsingle-module",
        descr="Combine modules for source files and binary dependencies into a single module",
    )
    add_compiler_builtins = Flag(
        "Xadd-compiler-builtins",
        descr="Add definitions of built-in declarations to the compilation classpath (useful with -no-stdlib)",
    )
    load_builtins_from_dependencies = Flag(
        "Xload-builtins-from-dependencies",
        descr="Load definitions of built-in declarations from module dependencies, instead of from the compiler",
    )

    # Output directories of friend modules; set by build tools, not by a switch.
    friend_paths = Field(factory=list)


__all__ = (
    "PLUGIN_OPTION_FORMAT",
    "Coroutines",
    "CommonCompilerArguments",
    "JvmCompilerArguments",
)
