from huffcodec.codecs import HuffmanCodec
from huffcodec.logger import Logger, MetricsLog
from huffcodec.performance_display import PerformanceDisplay
from huffcodec.report import format_code_table, format_metrics

lorem_ipsum_1par = "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Donec a consectetur ligula. Nunc erat dolor, tristique sed sagittis quis, dignissim eget erat. Vivamus enim lorem, finibus sit amet maximus eget, condimentum sit amet massa. Fusce aliquet velit sit amet ex pretium, ut tincidunt dolor semper. Nulla pellentesque eget massa quis rhoncus. Curabitur maximus quis mauris vel sollicitudin. Integer tristique ut nisl sed consequat. Donec a ipsum ut sem cursus ullamcorper. Sed finibus, sapien id volutpat tempus, turpis odio placerat purus, sit amet scelerisque nibh sem a magna. Sed justo sem, facilisis at imperdiet eu, tincidunt vel quam. Ut id sollicitudin eros, sit amet bibendum tortor. Lorem ipsum dolor sit amet, consectetur adipiscing elit."

def main():
    print(lorem_ipsum_1par)
    print(f"Size of original data: {len(lorem_ipsum_1par) * 8} bits")

    codec = HuffmanCodec()
    logger = Logger()
    logger.display_info = False
    analysis = codec.analyze(lorem_ipsum_1par, logger=logger)
    print(f"Size of encoded data: {len(analysis.encoded_text)} bits")

    print(format_code_table(analysis.frequencies, analysis.codes))
    print(format_metrics(analysis.metrics))

    for log in logger.get_logs(MetricsLog):
        print(log)

    pm = PerformanceDisplay(analysis)
    pm.generate_code_length_plot(show_graph=True)
    pm.generate_probability_plot(show_graph=True)

if __name__ == "__main__":
    main()
