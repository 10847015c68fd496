import matplotlib.pyplot as plt
import numpy as np

from .report import symbol_label

class PerformanceDisplay:
    def __init__(self, analysis,
                 fig_size=(10, 6), dpi=100, font_size=12,
                 bar_color='blue', bar_alpha=0.6,
                 line_color='red', line_linewidth=2):
        self.analysis = analysis
        self.fig_size = fig_size
        self.dpi = dpi
        self.font_size = font_size
        self.bar_color = bar_color
        self.bar_alpha = bar_alpha
        self.line_color = line_color
        self.line_linewidth = line_linewidth

    def _sorted_columns(self):
        frequencies = sorted(self.analysis.frequencies, key=lambda f: f.frequency, reverse=True)
        labels = [symbol_label(f.symbol.data) for f in frequencies]
        counts = np.array([f.frequency for f in frequencies])
        lengths = np.array([len(self.analysis.codes[f.symbol]) for f in frequencies])
        return labels, counts, lengths

    def _finish(self, title, show_graph, save_path):
        plt.title(title, fontsize=self.font_size + 2)
        plt.tight_layout()
        if save_path:
            plt.savefig(save_path)
        if show_graph:
            plt.show()
        plt.close()

    def generate_code_length_plot(self, show_graph=False, save_path=None):
        """Symbol frequencies as bars, code lengths on a second axis."""
        labels, counts, lengths = self._sorted_columns()
        x = np.arange(len(labels))

        fig, ax_counts = plt.subplots(figsize=self.fig_size, dpi=self.dpi)
        ax_counts.bar(x, counts, color=self.bar_color, alpha=self.bar_alpha, label="Frequency")
        ax_counts.set_xticks(x)
        ax_counts.set_xticklabels(labels, rotation=90, fontsize=self.font_size - 2)
        ax_counts.set_xlabel("Symbol", fontsize=self.font_size)
        ax_counts.set_ylabel("Frequency", fontsize=self.font_size)

        ax_lengths = ax_counts.twinx()
        ax_lengths.step(x, lengths, where='mid', color=self.line_color,
                        linewidth=self.line_linewidth, label="Code length")
        ax_lengths.set_ylabel("Code length (bits)", fontsize=self.font_size)
        ax_lengths.axhline(self.analysis.metrics.entropy, color='gray', linestyle='--', label="Entropy")

        fig.legend(fontsize=self.font_size)
        self._finish("Huffman Code Lengths", show_graph, save_path)

    def generate_probability_plot(self, show_graph=False, save_path=None):
        """Empirical symbol probabilities against the ideal 2^-length of each code."""
        labels, counts, lengths = self._sorted_columns()
        x = np.arange(len(labels))
        probabilities = counts / counts.sum()

        plt.figure(figsize=self.fig_size, dpi=self.dpi)
        plt.bar(x, probabilities, color=self.bar_color, alpha=self.bar_alpha, label="Probability")
        plt.plot(x, np.power(2.0, -lengths), color=self.line_color,
                 linewidth=self.line_linewidth, label="2^-code length")
        plt.xticks(x, labels, rotation=90, fontsize=self.font_size - 2)
        plt.xlabel("Symbol", fontsize=self.font_size)
        plt.ylabel("Probability", fontsize=self.font_size)
        plt.grid(True)
        plt.legend(fontsize=self.font_size)
        self._finish("Symbol Probabilities", show_graph, save_path)
